"""
Services Layer

Business logic for the logistics API. Each service receives the database
session (or the Database handle) it works with; route handlers only
translate between HTTP and these calls.
"""

from pandas_logistics.services.core.cargo_service import CargoService
from pandas_logistics.services.core.platform_service import PlatformService
from pandas_logistics.services.core.waitlist_service import WaitlistService

__all__ = ["CargoService", "PlatformService", "WaitlistService"]
