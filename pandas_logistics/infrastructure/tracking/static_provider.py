"""
In-memory demo tracking data
"""
from typing import Dict, Optional

from .base import ITrackingProvider
from pandas_logistics.schemas.cargo import TrackingStatus


DEMO_SHIPMENTS: Dict[str, Dict[str, str]] = {
    "101": {
        "status": "In Transit",
        "location": "Dar es Salaam Port",
        "eta": "2026-03-15",
    },
}


class StaticTrackingProvider(ITrackingProvider):
    """Serves tracking statuses from a fixed mapping, used for demos."""

    def __init__(self, shipments: Optional[Dict[str, Dict[str, str]]] = None, **_):
        self.shipments = DEMO_SHIPMENTS if shipments is None else shipments

    def lookup(self, cargo_id: str) -> TrackingStatus:
        entry = self.shipments.get(str(cargo_id))
        if entry is None:
            return TrackingStatus()
        return TrackingStatus(**entry)
