from datetime import datetime

from fastapi.testclient import TestClient

from userservice.main import create_app
from userservice.users.crud import UserStore


def test_root_returns_service_info(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert "message" in body
    assert body["version"] == "1.0.0"
    assert body["endpoints"] == {"users": "/api/users", "health": "/health"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None
    assert body["uptime"] >= 0


def test_unknown_route_returns_not_found(client):
    response = client.get("/unknown-route")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_nested_unknown_route_returns_not_found(client):
    response = client.get("/api/users/1/posts")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_method_not_allowed(client):
    response = client.patch("/api/users/1", json={"name": "X"})
    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


def test_apps_do_not_share_state(settings):
    with TestClient(create_app(settings)) as first, TestClient(create_app(settings)) as second:
        first.delete("/api/users/1")
        assert first.get("/api/users").json()["count"] == 2
        assert second.get("/api/users").json()["count"] == 3


def test_app_uses_given_store(settings):
    store = UserStore(seed=[{"id": 10, "name": "Solo", "email": "solo@example.com"}])
    with TestClient(create_app(settings, store=store)) as client:
        assert client.get("/api/users").json()["data"] == [
            {"id": 10, "name": "Solo", "email": "solo@example.com"}
        ]
        created = client.post("/api/users", json={"name": "Next", "email": "next@example.com"})
        assert created.json()["data"]["id"] == 11
    assert len(store.list()) == 2
