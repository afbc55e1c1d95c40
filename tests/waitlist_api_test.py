import logging

from pandas_logistics.models.waitlist import WaitlistEntry


def test_json_signup_echoes_submitted_fields(client):
    payload = {
        "name": "Amina Juma",
        "email": "amina@example.co.tz",
        "phone": "+255 700 000 000",
        "company": "Juma Imports",
        "user_type": "importer",
        "region": "East Africa",
    }
    response = client.post("/api/waitlist", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Successfully joined waitlist!"
    for key, value in payload.items():
        assert body["data"][key] == value
    assert body["data"]["timestamp"].endswith("Z")


def test_form_signup_is_accepted(client):
    response = client.post("/api/waitlist", data={"name": "Baraka", "email": "baraka@pandas.io"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Baraka"
    assert data["email"] == "baraka@pandas.io"
    assert data["user_type"] == "unknown"


def test_missing_name_or_email_is_rejected(client):
    for payload in ({"email": "a@b.com"}, {"name": "Only Name"}, {"name": "", "email": ""}, {}):
        response = client.post("/api/waitlist", json=payload)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Name and email are required",
            "timestamp": response.json()["timestamp"],
        }


def test_malformed_email_is_rejected(client):
    for email in ("no-at-sign.com", "user@nodot", "two words@x.com", "@domain.com", "user@example.com\n"):
        response = client.post("/api/waitlist", json={"name": "Test", "email": email})
        assert response.status_code == 400, email
        assert response.json()["error"] == "Invalid email format"


def test_non_object_json_body_is_rejected(client):
    response = client.post(
        "/api/waitlist",
        content="[1, 2, 3]",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_signup_is_logged_not_stored_by_default(client, database, caplog):
    with caplog.at_level(logging.INFO):
        response = client.post("/api/waitlist", json={"name": "Neema", "email": "neema@pandas.io"})

    assert response.status_code == 200
    assert any("neema@pandas.io" in record.getMessage() for record in caplog.records)

    session = database.session()
    try:
        assert session.query(WaitlistEntry).count() == 0
    finally:
        session.close()


def test_signup_is_stored_when_persistence_enabled(app_factory, database):
    client = app_factory(WAITLIST_PERSIST=True)

    response = client.post(
        "/api/waitlist",
        json={"name": "Zawadi", "email": "zawadi@pandas.io", "region": "Mwanza"},
    )

    assert response.status_code == 200
    session = database.session()
    try:
        entries = session.query(WaitlistEntry).all()
        assert [(e.name, e.email, e.region, e.user_type) for e in entries] == [
            ("Zawadi", "zawadi@pandas.io", "Mwanza", "unknown")
        ]
    finally:
        session.close()


def test_trailing_newline_in_email_is_rejected(app_factory, database):
    client = app_factory(WAITLIST_PERSIST=True)

    response = client.post("/api/waitlist", json={"name": "Test", "email": "user@example.com\n"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid email format"
    session = database.session()
    try:
        assert session.query(WaitlistEntry).count() == 0
    finally:
        session.close()


def test_non_text_optional_fields_are_echoed_as_sent(client):
    response = client.post(
        "/api/waitlist",
        json={"name": "Test", "email": "user@example.com", "phone": 255700000000, "region": ["TZ", "KE"]},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["phone"] == 255700000000
    assert data["region"] == ["TZ", "KE"]


def test_numeric_phone_is_stored_as_text(app_factory, database):
    client = app_factory(WAITLIST_PERSIST=True)

    response = client.post(
        "/api/waitlist",
        json={"name": "Test", "email": "user@example.com", "phone": 255700000000},
    )

    assert response.status_code == 200
    session = database.session()
    try:
        assert session.query(WaitlistEntry.phone).scalar() == "255700000000"
    finally:
        session.close()
