# server/tests/unit/test_change_status_literal.py
"""
POST /api/changeStatus en encodage "literal" : "open" / "close" uniquement.
"""

import pytest

pytestmark = pytest.mark.unit

INVALID = {"error": 'Invalid status. Allowed values are "open" or "close".'}


@pytest.fixture
def literal_client(make_client):
    return make_client(STATUS_ENCODING="literal")


def test_open_and_close(literal_client, access_key):
    r = literal_client.post("/api/changeStatus", json={"newStatus": "open", "apiKey": access_key})
    assert r.status_code == 200
    assert r.json()["message"] == 'Room status successfully changed to "open".'
    assert "OPEN" in literal_client.get("/").text

    r = literal_client.post("/api/changeStatus", json={"newStatus": "close", "apiKey": access_key})
    assert r.status_code == 200
    assert r.json()["message"] == 'Room status successfully changed to "closed".'
    assert "CLOSED" in literal_client.get("/").text


@pytest.mark.parametrize("value", [True, False, "pending", "OPEN", "closed", 123, None])
def test_rejects_anything_else(literal_client, access_key, value):
    r = literal_client.post("/api/changeStatus", json={"newStatus": value, "apiKey": access_key})
    assert r.status_code == 400
    assert r.json() == INVALID
    assert literal_client.get("/api/status").json()["open"] is False


def test_wrong_key_wins_over_bad_literal(literal_client):
    r = literal_client.post("/api/changeStatus", json={"newStatus": "pending", "apiKey": "wrong"})
    assert r.status_code == 403
