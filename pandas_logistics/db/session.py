from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from pandas_logistics.db.base import Database


def get_database(request: Request) -> Database:
    """The process-wide Database created at application startup."""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency yielding a database session

    The session is checked out of the application's pool for the duration
    of one request and closed afterwards.
    """
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
