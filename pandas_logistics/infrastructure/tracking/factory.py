"""
Tracking provider factory
"""
from typing import Any
import logging

from .base import ITrackingProvider
from .database_provider import DatabaseTrackingProvider
from .static_provider import StaticTrackingProvider

logger = logging.getLogger(__name__)


class TrackingProviderFactory:
    """Creates tracking providers by backend name"""

    _providers = {
        "database": DatabaseTrackingProvider,
        "static": StaticTrackingProvider,
    }

    @classmethod
    def create(cls, backend: str, **config: Any) -> ITrackingProvider:
        """
        Create a tracking provider

        Args:
            backend: provider name ("database", "static")
            **config: constructor arguments, e.g. ``db`` for the database provider

        Raises:
            ValueError: unknown backend
            KeyError: required constructor argument missing
        """
        backend = (backend or "").lower()
        if backend not in cls._providers:
            raise ValueError(f"Unsupported tracking backend: {backend}")

        provider_class = cls._providers[backend]

        try:
            return provider_class(**config)
        except TypeError as e:
            logger.error(f"Failed to create {backend} tracking provider: {e}")
            raise KeyError(f"Missing tracking provider argument: {e}")

    @classmethod
    def register_provider(cls, name: str, provider_class):
        if not issubclass(provider_class, ITrackingProvider):
            raise ValueError("Provider class must implement ITrackingProvider")

        cls._providers[name] = provider_class
        logger.info(f"Registered tracking provider: {name}")
