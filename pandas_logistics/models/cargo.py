from typing import Dict, Any, Optional

from sqlalchemy import Column, BIGINT, TEXT, DateTime

from pandas_logistics.db.base import Base, get_utc_datetime
from pandas_logistics.utils.snowflake_id import generate_snowflake_id


def _isoformat(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


class Cargo(Base):
    """
    Cargo record

    A shipment registered through the web form or the API. Records are
    inserted once and never updated or deleted.
    """
    __tablename__ = "cargo"

    id = Column(BIGINT, primary_key=True, index=True, default=lambda: generate_snowflake_id())
    sender_name = Column(TEXT, nullable=False)
    cargo_details = Column(TEXT, nullable=False)
    destination = Column(TEXT, nullable=False)
    created_at = Column(DateTime, default=get_utc_datetime, index=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "sender_name": self.sender_name,
            "cargo_details": self.cargo_details,
            "destination": self.destination,
            "created_at": _isoformat(self.created_at),
        }
