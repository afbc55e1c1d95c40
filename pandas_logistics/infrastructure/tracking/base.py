"""
Tracking provider interface
"""
from abc import ABC, abstractmethod

from pandas_logistics.schemas.cargo import TrackingStatus


class ITrackingProvider(ABC):
    """Resolves a cargo identifier to its current tracking status."""

    @abstractmethod
    def lookup(self, cargo_id: str) -> TrackingStatus:
        """
        Look up the tracking status of a cargo

        Args:
            cargo_id: identifier as received in the URL

        Returns:
            TrackingStatus: ``status`` is None when the id is unknown

        Raises:
            TrackingBackendError: the backend failed
        """
        pass
