"""
Tests for the error envelope returned by every endpoint.
"""
from fastapi.testclient import TestClient
from app.main import app


def test_unexpected_failure_is_opaque_500(client, auth_headers, monkeypatch):
    def boom(db, user_id):
        raise RuntimeError("database exploded")

    monkeypatch.setattr("app.api.routes.stats.dashboard_stats", boom)
    failing_client = TestClient(app, raise_server_exceptions=False)

    response = failing_client.get("/api/stats", headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "code": "INTERNAL_ERROR"}


def test_malformed_json_body(client, auth_headers):
    response = client.post(
        "/api/budgets",
        content="{not json",
        headers={**auth_headers, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "BAD_REQUEST"


def test_unknown_route(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}
