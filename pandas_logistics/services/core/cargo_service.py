import logging
from typing import Any, Dict, List, Mapping

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pandas_logistics.infrastructure.exceptions import PersistenceError, RequestValidationFailed
from pandas_logistics.infrastructure.tracking import ITrackingProvider
from pandas_logistics.models.cargo import Cargo
from pandas_logistics.schemas.cargo import CargoCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("sender_name", "cargo_details", "destination")


class CargoService:
    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def parse(payload: Mapping[str, Any]) -> CargoCreate:
        """
        Validate a registration payload

        Raises:
            RequestValidationFailed: a field is missing, blank or not a string
        """
        try:
            cargo_data = CargoCreate(**{field: payload.get(field) for field in REQUIRED_FIELDS})
        except ValidationError:
            raise RequestValidationFailed("Sender name, cargo details and destination must be text")

        missing = [field for field in REQUIRED_FIELDS
                   if not (getattr(cargo_data, field) or "").strip()]
        if missing:
            raise RequestValidationFailed(
                f"Missing required fields: {', '.join(missing)}"
            )
        return cargo_data

    def register_cargo(self, cargo_data: CargoCreate) -> Dict[str, Any]:
        """
        Insert a new cargo record

        The id and created_at are assigned server side.

        Raises:
            PersistenceError: the insert failed
        """
        try:
            new_cargo = Cargo(
                sender_name=cargo_data.sender_name,
                cargo_details=cargo_data.cargo_details,
                destination=cargo_data.destination,
            )
            self.db.add(new_cargo)
            self.db.commit()
            self.db.refresh(new_cargo)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Cargo registration failed: {e}")
            raise PersistenceError(str(e)) from e

        logger.info(f"Cargo registered: {new_cargo.id} -> {new_cargo.destination}")
        return new_cargo.to_dict()

    def list_cargo(self) -> List[Dict[str, Any]]:
        """All cargo records, newest first."""
        try:
            rows = (
                self.db.query(Cargo)
                .order_by(Cargo.created_at.desc(), Cargo.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Cargo listing failed: {e}")
            raise PersistenceError(str(e)) from e
        return [cargo.to_dict() for cargo in rows]

    @staticmethod
    def track(cargo_id: str, provider: ITrackingProvider) -> Dict[str, Any]:
        return provider.lookup(cargo_id).to_dict()
