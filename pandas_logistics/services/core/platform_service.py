import logging
from typing import Any, Dict, List

from sqlalchemy import func, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pandas_logistics.core.config import Settings
from pandas_logistics.db.base import Database
from pandas_logistics.infrastructure.exceptions import PersistenceError
from pandas_logistics.infrastructure.response import utc_timestamp
from pandas_logistics.models.user import User, Agent, Importer, Supplier

logger = logging.getLogger(__name__)

MISSION = "Eliminate import fraud in Africa through live verification technology"

FEATURES = [
    "DFA Technology - Digital Fingerprint Authentication",
    "Live Verification - Real-time cargo inspection",
    "Trade Protection - Fraud elimination systems",
    "Port Management - Clearance and handling",
    "Global Sourcing - Verified supplier network",
]

# method, path, description
ENDPOINTS = [
    ("GET", "/", "API welcome"),
    ("GET", "/api/health", "Health check with database status"),
    ("GET", "/api/info", "Platform information"),
    ("GET", "/api/stats", "Platform statistics"),
    ("GET", "/api/test-db", "Test database connection"),
    ("POST", "/api/waitlist", "Join waitlist"),
    ("GET", "/api/users", "List recent users"),
    ("GET", "/api/cargo", "List cargo"),
    ("POST", "/api/cargo", "Register cargo"),
    ("GET", "/cargo", "Cargo dashboard"),
    ("POST", "/add-cargo", "Register cargo"),
    ("POST", "/add-cargo-web", "Register cargo from the dashboard form"),
    ("GET", "/track/{id}", "Track cargo"),
]

COUNTED_TABLES = (
    ("total_users", User.user_id),
    ("total_agents", Agent.id),
    ("total_importers", Importer.id),
    ("total_suppliers", Supplier.id),
)


def available_endpoints() -> List[str]:
    return [f"{method} {path}" for method, path, _ in ENDPOINTS]


class PlatformService:
    """Welcome/info metadata, health probe, statistics and user listing."""

    def __init__(self, settings: Settings, database: Database):
        self.settings = settings
        self.database = database

    def _contact(self) -> Dict[str, str]:
        return {
            "email": self.settings.CONTACT_EMAIL,
            "website": self.settings.WEBSITE_URL,
            "github": self.settings.DOCUMENTATION_URL,
        }

    def welcome(self) -> Dict[str, Any]:
        return {
            "platform": self.settings.PROJECT_NAME,
            "tagline": self.settings.TAGLINE,
            "message": "Welcome to PANDAS API - Eliminating import fraud in Africa through live verification",
            "status": "operational",
            "version": self.settings.VERSION,
            "endpoints": {f"{method} {path}": description for method, path, description in ENDPOINTS},
            "documentation": self.settings.DOCUMENTATION_URL,
            "contact": self._contact(),
        }

    def info(self) -> Dict[str, Any]:
        return {
            "platform": self.settings.PROJECT_NAME,
            "tagline": self.settings.TAGLINE,
            "mission": MISSION,
            "founded": "January 27, 2026",
            "location": "Houston, Texas -> East Africa",
            "version": self.settings.VERSION,
            "status": "operational",
            "features": FEATURES,
            "endpoints": [f"{method} {path} - {description}" for method, path, description in ENDPOINTS],
            "contact": self._contact(),
        }

    def health(self) -> Dict[str, Any]:
        """
        Probe the database once

        Raises:
            DatabaseUnavailableError: the probe query failed
        """
        server_time = self.database.ping()
        return {
            "status": "success",
            "message": "PANDAS API is healthy!",
            "timestamp": utc_timestamp(),
            "database": "connected",
            "server_time": server_time.isoformat() if hasattr(server_time, "isoformat") else str(server_time),
            "version": self.settings.VERSION,
            "environment": self.settings.NODE_ENV,
        }

    @staticmethod
    def statistics(db: Session) -> Dict[str, Any]:
        """
        Row counts of the four partner tables

        Each count is an independent query, no transaction spans them.
        The database name and table count describe the connected schema.
        """
        counts: Dict[str, Any] = {}
        try:
            for key, column in COUNTED_TABLES:
                counts[key] = int(db.query(func.count(column)).scalar() or 0)
            bind = db.get_bind()
            counts["database"] = bind.url.database
            counts["tables"] = len(inspect(bind).get_table_names())
        except SQLAlchemyError as e:
            logger.error(f"Stats error: {e}")
            raise PersistenceError(str(e)) from e

        counts["status"] = "operational"
        return counts

    def tables(self) -> List[str]:
        return self.database.table_names()

    @staticmethod
    def recent_users(db: Session, limit: int = 10) -> List[Dict[str, Any]]:
        try:
            users = db.query(User).order_by(User.created_at.desc()).limit(limit).all()
        except SQLAlchemyError as e:
            logger.error(f"Users fetch error: {e}")
            raise PersistenceError(str(e)) from e
        return [user.to_dict() for user in users]
