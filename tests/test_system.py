"""Tests for health checks and error reporting."""

from app.core.database import Base


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_malformed_json_is_bad_request(client):
    response = client.post(
        "/profiles",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_non_integer_path_id_is_bad_request(client):
    response = client.get("/profiles/abc")

    assert response.status_code == 400
    assert "error" in response.json()


def test_storage_fault_is_reported_as_server_error(client, engine):
    Base.metadata.drop_all(bind=engine)

    response = client.post("/profiles", json={"name": "Ava"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create profile"}


def test_storage_fault_on_read(client, engine):
    Base.metadata.drop_all(bind=engine)

    response = client.get("/roadmaps", params={"profile_id": 1})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to retrieve roadmap"}
