from .base import ITrackingProvider
from .factory import TrackingProviderFactory

__all__ = ["ITrackingProvider", "TrackingProviderFactory"]
