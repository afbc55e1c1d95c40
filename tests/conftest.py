"""
Shared fixtures

Every test gets its own application built by ``create_app`` over a
throw-away sqlite file, so nothing touches a real database.
"""
import os
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from pandas_logistics.core.config import Settings
from pandas_logistics.db.base import Database
from pandas_logistics.main import create_app
from pandas_logistics.models.user import User, Agent, Importer, Supplier


def make_settings(**overrides) -> Settings:
    values = {"NODE_ENV": "test", "CREATE_TABLES": True}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{os.path.join(str(tmp_path), 'pandas_test.db')}")
    yield db
    db.dispose()


@pytest.fixture
def app_factory(database):
    """Build a started TestClient with optional settings overrides."""
    clients = []

    def _build(db: Database = None, raise_server_exceptions: bool = True, **overrides) -> TestClient:
        app = create_app(settings=make_settings(**overrides), database=db or database)
        client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        client.__enter__()
        clients.append(client)
        return client

    yield _build

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(app_factory):
    return app_factory()


@pytest.fixture
def unreachable_database(tmp_path):
    # parent directory does not exist, so sqlite cannot open the file
    db = Database(f"sqlite:///{os.path.join(str(tmp_path), 'missing', 'dir', 'pandas.db')}")
    yield db
    db.dispose()


@pytest.fixture
def seed_users(database):
    """Insert ``count`` users with strictly increasing created_at."""

    def _seed(count: int):
        database.create_tables()
        base = datetime(2026, 2, 1, 8, 0, 0)
        session = database.session()
        try:
            for i in range(count):
                session.add(User(
                    full_name=f"User {i}",
                    email=f"user{i}@pandas-global.com",
                    user_type="importer",
                    country="TZ",
                    created_at=base + timedelta(minutes=i),
                ))
            session.commit()
        finally:
            session.close()

    return _seed


@pytest.fixture
def seed_partners(database):
    def _seed(agents: int = 0, importers: int = 0, suppliers: int = 0):
        database.create_tables()
        session = database.session()
        try:
            for model, count in ((Agent, agents), (Importer, importers), (Supplier, suppliers)):
                for i in range(count):
                    session.add(model(name=f"{model.__tablename__}-{i}"))
            session.commit()
        finally:
            session.close()

    return _seed
