import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from pandas_logistics.infrastructure.exceptions import DatabaseUnavailableError, PersistenceError

logger = logging.getLogger(__name__)


def get_utc_datetime():
    """Current UTC time, naive, the way the timestamp columns store it."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# Declarative base shared by every model
Base = declarative_base()


class Database:
    """
    Process-scoped database handle

    Owns the pooled engine and the session factory. One instance is created
    when the application starts and is handed to request handlers through
    dependency injection; ``dispose`` drains the pool on shutdown.
    """

    def __init__(
            self,
            url: str,
            pool_size: int = 10,
            max_overflow: int = 20,
            pool_recycle: int = 3600,
            require_ssl: bool = False,
            echo: bool = False,
    ):
        self.url = url
        engine_kwargs: Dict[str, Any] = {"pool_pre_ping": True, "echo": echo}
        connect_args: Dict[str, Any] = {}

        if url.startswith("sqlite"):
            # sqlite connections are shared across the threadpool FastAPI runs sync routes in
            connect_args["check_same_thread"] = False
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=pool_recycle,
            )
            if require_ssl and url.startswith("postgresql"):
                connect_args["sslmode"] = "require"

        if connect_args:
            engine_kwargs["connect_args"] = connect_args

        self.engine: Engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings) -> "Database":
        return cls(
            settings.SQLALCHEMY_DATABASE_URI,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
            require_ssl=settings.is_production,
        )

    def session(self) -> Session:
        return self.SessionLocal()

    def create_tables(self) -> None:
        """Create every table that does not exist yet."""
        # registers the models on Base.metadata
        import pandas_logistics.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("All tables created or already present")

    def ping(self) -> Any:
        """
        Run a trivial query and return the database server time

        Raises:
            DatabaseUnavailableError: the database could not be reached
        """
        try:
            with self.engine.connect() as connection:
                return connection.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()
        except SQLAlchemyError as e:
            raise DatabaseUnavailableError(str(e)) from e

    def table_names(self) -> List[str]:
        try:
            return sorted(inspect(self.engine).get_table_names())
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database pool closed")

