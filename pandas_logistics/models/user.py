from typing import Dict, Any

from sqlalchemy import Column, BIGINT, VARCHAR, DateTime

from pandas_logistics.db.base import Base, get_utc_datetime
from pandas_logistics.models.cargo import _isoformat
from pandas_logistics.utils.snowflake_id import generate_snowflake_id


class User(Base):
    """
    Platform user

    Rows are written by the onboarding tools, the API only reads them.
    """
    __tablename__ = "users"

    user_id = Column(BIGINT, primary_key=True, index=True, default=lambda: generate_snowflake_id())
    full_name = Column(VARCHAR(255), nullable=False)
    email = Column(VARCHAR(255), nullable=False)
    user_type = Column(VARCHAR(50), nullable=True)  # importer / agent / supplier ...
    phone = Column(VARCHAR(50), nullable=True)
    country = Column(VARCHAR(100), nullable=True)
    created_at = Column(DateTime, default=get_utc_datetime)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": str(self.user_id),
            "full_name": self.full_name,
            "email": self.email,
            "user_type": self.user_type,
            "phone": self.phone,
            "country": self.country,
            "created_at": _isoformat(self.created_at),
        }


# The three partner tables below are only counted by the stats endpoint.

class Agent(Base):
    __tablename__ = "agents"

    id = Column(BIGINT, primary_key=True, default=lambda: generate_snowflake_id())
    name = Column(VARCHAR(255), nullable=False)
    created_at = Column(DateTime, default=get_utc_datetime)


class Importer(Base):
    __tablename__ = "importers"

    id = Column(BIGINT, primary_key=True, default=lambda: generate_snowflake_id())
    name = Column(VARCHAR(255), nullable=False)
    created_at = Column(DateTime, default=get_utc_datetime)


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(BIGINT, primary_key=True, default=lambda: generate_snowflake_id())
    name = Column(VARCHAR(255), nullable=False)
    created_at = Column(DateTime, default=get_utc_datetime)
