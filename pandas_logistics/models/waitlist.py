from sqlalchemy import Column, BIGINT, VARCHAR, DateTime

from pandas_logistics.db.base import Base, get_utc_datetime
from pandas_logistics.utils.snowflake_id import generate_snowflake_id


class WaitlistEntry(Base):
    """Waitlist signup, stored only when WAITLIST_PERSIST is enabled."""
    __tablename__ = "waitlist_entries"

    id = Column(BIGINT, primary_key=True, index=True, default=lambda: generate_snowflake_id())
    name = Column(VARCHAR(255), nullable=False)
    email = Column(VARCHAR(255), nullable=False)
    phone = Column(VARCHAR(50), nullable=True)
    company = Column(VARCHAR(255), nullable=True)
    user_type = Column(VARCHAR(50), nullable=True)
    region = Column(VARCHAR(100), nullable=True)
    created_at = Column(DateTime, default=get_utc_datetime)

