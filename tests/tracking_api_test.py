import pytest

from pandas_logistics.infrastructure.exceptions import TrackingBackendError
from pandas_logistics.infrastructure.tracking import ITrackingProvider, TrackingProviderFactory
from pandas_logistics.infrastructure.tracking.static_provider import StaticTrackingProvider


def test_static_backend_knows_demo_shipment(app_factory):
    client = app_factory(TRACKING_BACKEND="static")

    response = client.get("/track/101")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "In Transit"
    assert body["location"]
    assert body["eta"]


def test_static_backend_unknown_id(app_factory):
    client = app_factory(TRACKING_BACKEND="static")

    for cargo_id in ("102", "abc", "1010"):
        response = client.get(f"/track/{cargo_id}")
        assert response.status_code == 200
        assert response.json() == {"status": None}


def test_database_backend_finds_registered_cargo(client):
    cargo = client.post(
        "/add-cargo",
        json={"sender_name": "Halima", "cargo_details": "Solar panels", "destination": "Dodoma"},
    ).json()["data"]

    response = client.get(f"/track/{cargo['id']}")

    assert response.status_code == 200
    assert response.json() == {
        "status": "Registered",
        "location": None,
        "eta": None,
        "destination": "Dodoma",
        "sender_name": "Halima",
        "registered_at": cargo["created_at"],
    }


def test_database_backend_unknown_or_non_numeric_id(client):
    assert client.get("/track/101").json() == {"status": None}
    assert client.get("/track/not-a-number").json() == {"status": None}


def test_backend_failure_returns_500_error(app_factory, unreachable_database):
    client = app_factory(db=unreachable_database)

    response = client.get("/track/12345")

    assert response.status_code == 500
    assert "error" in response.json()


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError):
        TrackingProviderFactory.create("carrier-pigeon")


def test_factory_requires_session_for_database_backend():
    with pytest.raises(KeyError):
        TrackingProviderFactory.create("database")


def test_custom_provider_can_be_registered():
    class FailingProvider(ITrackingProvider):
        def __init__(self, **_):
            pass

        def lookup(self, cargo_id):
            raise TrackingBackendError("carrier API down")

    TrackingProviderFactory.register_provider("failing", FailingProvider)
    try:
        provider = TrackingProviderFactory.create("failing")
        with pytest.raises(TrackingBackendError):
            provider.lookup("1")
    finally:
        TrackingProviderFactory._providers.pop("failing", None)


def test_static_provider_accepts_custom_shipments():
    provider = StaticTrackingProvider(shipments={"A1": {"status": "Delivered", "location": "Kigali"}})

    assert provider.lookup("A1").to_dict() == {"status": "Delivered", "location": "Kigali", "eta": None}
    assert provider.lookup("A2").to_dict() == {"status": None}
