"""
Unit tests for the building blocks below the HTTP layer.
"""
import pytest

from pandas_logistics.core.config import Settings
from pandas_logistics.db.base import Database
from pandas_logistics.infrastructure.exceptions import DatabaseUnavailableError, RequestValidationFailed
from pandas_logistics.infrastructure.response import error_response, public_error_message, success_response
from pandas_logistics.services import CargoService, WaitlistService
from pandas_logistics.utils.snowflake_id import SnowflakeIDGenerator


def test_database_url_normalisation():
    assert Settings(DATABASE_URL="postgres://u:p@host:5432/pandas_db").SQLALCHEMY_DATABASE_URI == \
        "postgresql+psycopg2://u:p@host:5432/pandas_db"
    assert Settings(DATABASE_URL="sqlite:///local.db").SQLALCHEMY_DATABASE_URI == "sqlite:///local.db"


def test_database_url_built_from_components():
    settings = Settings(DATABASE_URL=None, DB_USER="pandas", DB_PASSWORD="pw", DB_HOST="db", DB_PORT="3307", DB_NAME="logistics")
    assert settings.SQLALCHEMY_DATABASE_URI == "mysql+pymysql://pandas:pw@db:3307/logistics"


def test_production_flag():
    assert Settings(NODE_ENV="production").is_production
    assert not Settings(NODE_ENV="development").is_production


def test_cors_origins_from_comma_string():
    assert Settings.assemble_cors_origins("http://a.com, http://b.com") == ["http://a.com", "http://b.com"]
    assert Settings.assemble_cors_origins('["http://a.com"]') == ["http://a.com"]


def test_envelopes():
    ok = success_response(data={"id": 1}, message="done", count=1)
    assert ok["success"] is True
    assert ok["data"] == {"id": 1}
    assert ok["count"] == 1
    assert ok["timestamp"].endswith("Z")

    failed = error_response(error="Failed")
    assert failed["success"] is False
    assert "message" not in failed


def test_public_error_message():
    exc = ValueError("relation \"users\" does not exist")
    assert public_error_message(exc, production=False) == str(exc)
    assert public_error_message(exc, production=True) == "Something went wrong"


def test_snowflake_ids_are_unique_and_increasing():
    generator = SnowflakeIDGenerator()
    ids = [generator.generate_id() for _ in range(5000)]

    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)
    assert generator.parse_id(ids[0])["machine_id"] == 0


def test_snowflake_rejects_bad_machine_id():
    with pytest.raises(ValueError):
        SnowflakeIDGenerator(machine_id=1024)


def test_waitlist_parse_keeps_values_unchanged():
    signup = WaitlistService.parse({"name": " Spaced Name ", "email": "x@y.io", "ignored": "field"})
    assert signup.name == " Spaced Name "
    assert signup.phone is None


def test_waitlist_parse_rejects_blank_name():
    with pytest.raises(RequestValidationFailed) as excinfo:
        WaitlistService.parse({"name": "   ", "email": "x@y.io"})
    assert excinfo.value.status_code == 400


def test_cargo_parse_reports_every_missing_field():
    with pytest.raises(RequestValidationFailed) as excinfo:
        CargoService.parse({})
    assert excinfo.value.message == "Missing required fields: sender_name, cargo_details, destination"


def test_ping_raises_when_unreachable(tmp_path):
    database = Database(f"sqlite:///{tmp_path}/no/such/dir.db")
    try:
        with pytest.raises(DatabaseUnavailableError):
            database.ping()
    finally:
        database.dispose()


def test_cargo_timestamps_serialise_as_none_when_missing():
    from pandas_logistics.models.cargo import Cargo

    assert Cargo(sender_name="A", cargo_details="B", destination="C").to_dict()["created_at"] is None
