"""
Core Services Module

Plain CRUD services: cargo registration and listing, waitlist signups and
the platform health/statistics queries.
"""
