"""
API tests for system endpoints.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from movie_reviews.api.dependencies import get_database_manager, get_movies_dao
from movie_reviews.api.main import app
from movie_reviews.database.movies_dao import MoviesDAO

client = TestClient(app)


@pytest.fixture
def db_manager():
    manager = MagicMock()
    manager.ping.return_value = {"ok": 1.0}
    ready_dao = MoviesDAO()
    ready_dao.inject_db({"ns": {"movies": MagicMock()}}, "ns")
    app.dependency_overrides[get_database_manager] = lambda: manager
    app.dependency_overrides[get_movies_dao] = lambda: ready_dao
    yield manager
    app.dependency_overrides.clear()


class TestSystemEndpoints:
    """Tests for GET / and GET /api/v1/health."""

    def test_root(self):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["health"] == "/api/v1/health"

    def test_health_connected(self, db_manager):
        r = client.get("/api/v1/health")

        assert r.status_code == 200
        assert r.json() == {"status": "healthy", "database": "connected", "movies_ready": True}

    def test_health_unreachable(self, db_manager):
        db_manager.ping.side_effect = ServerSelectionTimeoutError("localhost:27017: connection refused")

        data = client.get("/api/v1/health").json()

        assert data["status"] == "unhealthy"
        assert "connection refused" in data["database"]
