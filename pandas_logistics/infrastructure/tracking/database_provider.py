"""
Tracking backed by the cargo table
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .base import ITrackingProvider
from pandas_logistics.infrastructure.exceptions import TrackingBackendError
from pandas_logistics.models.cargo import Cargo
from pandas_logistics.schemas.cargo import TrackingStatus

logger = logging.getLogger(__name__)

REGISTERED_STATUS = "Registered"


class DatabaseTrackingProvider(ITrackingProvider):
    """
    Looks the identifier up in the cargo table

    Cargo rows carry no movement history yet, so a found record is reported
    as registered with no location or ETA.
    """

    def __init__(self, db: Session, **_):
        self.db = db

    def lookup(self, cargo_id: str) -> TrackingStatus:
        try:
            key = int(cargo_id)
        except (TypeError, ValueError):
            return TrackingStatus()

        try:
            cargo = self.db.query(Cargo).filter(Cargo.id == key).first()
        except SQLAlchemyError as e:
            logger.error(f"Tracking lookup failed for {cargo_id}: {e}")
            raise TrackingBackendError(str(e)) from e

        if cargo is None:
            return TrackingStatus()

        record = cargo.to_dict()
        return TrackingStatus(
            status=REGISTERED_STATUS,
            destination=record["destination"],
            sender_name=record["sender_name"],
            registered_at=record["created_at"],
        )
