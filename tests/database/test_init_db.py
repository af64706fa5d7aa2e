"""
Unit tests for index creation and schema verification.
"""

from unittest.mock import MagicMock

from pymongo import ASCENDING, TEXT

from movie_reviews.database.init_db import (
    REVIEWS_MOVIE_ID_INDEX,
    TITLE_TEXT_INDEX,
    init_database,
    verify_schema,
)


def make_manager(collections=("movies", "reviews"), movie_indexes=(TITLE_TEXT_INDEX,)):
    """DatabaseManager double backed by MagicMock collections."""
    db = MagicMock()
    db.name = "movie_reviews_test"
    db.list_collection_names.return_value = list(collections)
    movies, reviews = MagicMock(), MagicMock()
    movies.index_information.return_value = {"_id_": {}, **{name: {} for name in movie_indexes}}
    db.__getitem__.side_effect = {"movies": movies, "reviews": reviews}.__getitem__
    manager = MagicMock()
    manager.get_database.return_value = db
    return manager, movies, reviews


class TestInitDatabase:

    def test_creates_title_text_and_movie_id_indexes(self):
        manager, movies, reviews = make_manager()

        assert init_database(manager) is manager

        movies.create_index.assert_called_once_with([("title", TEXT)], name=TITLE_TEXT_INDEX)
        reviews.create_index.assert_called_once_with(
            [("movie_id", ASCENDING)], name=REVIEWS_MOVIE_ID_INDEX
        )

    def test_uses_requested_namespace(self):
        manager, _, _ = make_manager()

        init_database(manager, "other_ns")

        manager.get_database.assert_called_once_with("other_ns")


class TestVerifySchema:

    def test_complete_schema(self):
        manager, _, _ = make_manager()
        assert verify_schema(manager) is True

    def test_missing_reviews_collection(self):
        manager, _, _ = make_manager(collections=("movies",))
        assert verify_schema(manager) is False

    def test_missing_text_index(self):
        manager, _, _ = make_manager(movie_indexes=())
        assert verify_schema(manager) is False
