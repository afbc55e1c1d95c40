import logging
import re
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pandas_logistics.infrastructure.exceptions import PersistenceError, RequestValidationFailed
from pandas_logistics.infrastructure.response import utc_timestamp
from pandas_logistics.models.waitlist import WaitlistEntry
from pandas_logistics.schemas.waitlist import WaitlistCreate

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

DEFAULT_USER_TYPE = "unknown"


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class WaitlistService:
    def __init__(self, db: Session, persist: bool = False):
        self.db = db
        self.persist = persist

    @staticmethod
    def parse(payload: Mapping[str, Any]) -> WaitlistCreate:
        """
        Validate a signup payload

        Raises:
            RequestValidationFailed: name/email missing or email malformed
        """
        try:
            signup = WaitlistCreate(**{field: payload.get(field) for field in WaitlistCreate.model_fields})
        except ValidationError:
            raise RequestValidationFailed("Invalid waitlist submission")

        if not (signup.name or "").strip() or not (signup.email or "").strip():
            raise RequestValidationFailed("Name and email are required")

        if not EMAIL_PATTERN.fullmatch(signup.email):
            raise RequestValidationFailed("Invalid email format")

        return signup

    def join(self, signup: WaitlistCreate) -> Dict[str, Any]:
        """
        Record a waitlist signup

        The signup is always logged; it is written to ``waitlist_entries``
        only when persistence is switched on.
        """
        timestamp = utc_timestamp()
        user_type = signup.user_type or DEFAULT_USER_TYPE
        logger.info(
            f"New waitlist signup: name={signup.name} email={signup.email} "
            f"user_type={user_type} timestamp={timestamp}"
        )

        if self.persist:
            try:
                entry = WaitlistEntry(
                    name=signup.name,
                    email=signup.email,
                    phone=_as_text(signup.phone),
                    company=_as_text(signup.company),
                    user_type=_as_text(user_type),
                    region=_as_text(signup.region),
                )
                self.db.add(entry)
                self.db.commit()
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"Waitlist signup could not be stored: {e}")
                raise PersistenceError(str(e)) from e

        return {
            "name": signup.name,
            "email": signup.email,
            "phone": signup.phone,
            "company": signup.company,
            "user_type": user_type,
            "region": signup.region,
            "timestamp": timestamp,
        }
