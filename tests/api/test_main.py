"""
Tests for application startup and shutdown.

Runs the real lifespan with the MongoDB client replaced by mongomock.
"""

import logging

import mongomock
import pytest
from fastapi.testclient import TestClient

from movie_reviews.api import dependencies
from movie_reviews.api.main import app
from movie_reviews.database import connection

NS = "movie_reviews_lifespan"


@pytest.fixture
def mock_mongo(monkeypatch):
    """Point the connection manager at mongomock and start from clean singletons."""
    monkeypatch.setattr(connection, "MongoClient", mongomock.MongoClient)
    monkeypatch.setenv("MOVIEREVIEWS_NS", NS)
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.setattr(connection, "_db_manager", None)
    monkeypatch.setattr(dependencies, "_movies_dao", None)
    mongomock.MongoClient().drop_database(NS)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    app.dependency_overrides.clear()
    mongomock.MongoClient().drop_database(NS)


class TestLifespan:
    """Tests for DAO injection on startup and cleanup on shutdown."""

    def test_dao_ready_before_first_request(self, mock_mongo):
        with TestClient(app) as client:
            dao = dependencies._movies_dao
            assert dao is not None
            assert dao.is_ready
            assert dao.movies.database.name == NS

            r = client.get("/api/v1/movies")

            assert r.status_code == 200
            assert r.json()["total_results"] == 0
            assert dependencies.get_movies_dao() is dao

    def test_shutdown_resets_dao_and_closes_client(self, mock_mongo):
        with TestClient(app):
            assert connection._db_manager is not None

        assert dependencies._movies_dao is None
        assert connection._db_manager is None

    def test_requests_see_seeded_data(self, mock_mongo):
        with TestClient(app) as client:
            db = connection.get_db_manager().get_database()
            db["movies"].insert_many([{"title": f"Movie {i}", "rated": "PG"} for i in range(25)])

            data = client.get("/api/v1/movies?page=1&moviesPerPage=20").json()

        assert data["total_results"] == 25
        assert len(data["movies"]) == 5
