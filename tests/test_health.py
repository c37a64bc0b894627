# =============================================================================
# tests/test_health.py - Health and Startup Tests
# =============================================================================
# Tests for health endpoints, the root endpoint and startup behavior.
# =============================================================================

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app import __version__
from app.main import create_app
from lib.user_store import StoreError, UserStore


class TestHealthEndpoints:
    """Tests for /health, /health/live and /health/ready."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "development"
        assert body["version"] == __version__

    def test_liveness(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_readiness_healthy(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
        assert response.json()["checks"]["database"] == "healthy"

    def test_readiness_degraded(self, client, store):
        """A failed ping reports degraded instead of erroring."""
        with patch.object(store, "ping", side_effect=StoreError("connection refused", code="PING_FAILED")):
            response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["checks"]["database"].startswith("unhealthy")

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "Users API"


class TestStartup:
    """Tests for the application lifespan."""

    def test_startup_fails_fast_without_database(self, tmp_path, test_settings):
        """An unreachable database aborts startup."""
        store = UserStore.from_url(f"sqlite:///{tmp_path / 'missing' / 'users.db'}")
        app = create_app(settings=test_settings, store=store)

        with pytest.raises(StoreError):
            with TestClient(app):
                pass

    def test_startup_creates_table(self, engine, test_settings):
        """Starting the app on an empty database makes /users usable."""
        app = create_app(settings=test_settings, store=UserStore(engine))

        with TestClient(app) as client:
            assert client.get("/users").json() == []
