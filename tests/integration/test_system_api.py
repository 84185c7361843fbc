"""
Integration tests for the welcome, health and status endpoints and
for error handling at the application level.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.main import create_app


class TestWelcome:
    """GET /"""

    def test_welcome(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Welcome to the Catalog API"
        assert body["version"] == "1.0.0"
        assert body["documentation"]["users"] == "GET /api/users"
        assert "timestamp" in body


class TestHealth:
    """GET /api/health"""

    def test_healthy(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "1.0.0"
        assert body["uptime"] >= 0
        assert body["timestamp"].endswith("Z")


class TestStatus:
    """GET /api/status"""

    def test_server_metadata(self, client):
        body = client.get("/api/status").json()

        assert body["server"] == "catalog-api"
        assert body["environment"] == "development"
        assert "GET /api/health" in body["endpoints"]
        assert "POST /api/users/bulk" in body["endpoints"]

    def test_reports_memory_usage(self, client):
        memory = client.get("/api/status").json()["memory"]

        assert memory["maxRss"] > 0
        assert memory["userCpuSeconds"] >= 0


class TestRouteNotFound:
    """Unmatched routes."""

    def test_unknown_path(self, client):
        response = client.get("/api/orders?page=2")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Route not found", "path": "/api/orders?page=2"}

    def test_unknown_method(self, client):
        response = client.patch("/api/users/1", json={"name": "X"})

        assert response.status_code == 404
        assert response.json()["error"] == "Route not found"


def _app_with_failing_route(settings: Settings) -> FastAPI:
    app = create_app(settings=settings)

    @app.get("/api/explode")
    async def explode():
        raise RuntimeError("kaboom")

    return app


class TestServerErrors:
    """Faults inside handlers."""

    def test_development_shows_message(self, settings):
        with TestClient(_app_with_failing_route(settings), raise_server_exceptions=False) as client:
            response = client.get("/api/explode")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Something went wrong!", "message": "kaboom"}

    def test_production_hides_message(self):
        settings = Settings(environment="production")
        with TestClient(_app_with_failing_route(settings), raise_server_exceptions=False) as client:
            response = client.get("/api/explode")

        assert response.status_code == 500
        assert response.json()["message"] == "Internal Server Error"

    def test_malformed_json_body(self, client):
        response = client.post(
            "/api/users",
            content=b'{"name": "broken"',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json()["success"] is False
        assert response.json()["error"] == "Something went wrong!"

    def test_state_survives_errors(self, client):
        client.post("/api/users", content=b"{", headers={"Content-Type": "application/json"})

        assert client.get("/api/users").json()["count"] == 2


class TestCors:
    def test_allows_any_origin_by_default(self, client):
        response = client.get("/api/health", headers={"Origin": "http://example.org"})

        assert response.headers["access-control-allow-origin"] == "*"


class TestTrailingSlash:
    """A trailing slash is optional on every route."""

    def test_list_with_trailing_slash(self, client):
        response = client.get("/api/users/", follow_redirects=False)

        assert response.status_code == 200
        assert response.json()["count"] == 2

    def test_record_with_trailing_slash(self, client):
        response = client.get("/api/products/1/", follow_redirects=False)

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Laptop"

    def test_create_with_trailing_slash(self, client):
        response = client.post("/api/users/", json={"name": "Slash", "email": "s@x.com"}, follow_redirects=False)

        assert response.status_code == 201

    def test_unknown_path_echoes_path_as_sent(self, client):
        response = client.get("/api/orders/")

        assert response.status_code == 404
        assert response.json()["path"] == "/api/orders/"
