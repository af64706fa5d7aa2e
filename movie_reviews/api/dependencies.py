"""
FastAPI dependency injection for the database manager and movies DAO.
"""

import logging

from movie_reviews.api.config import get_database_name
from movie_reviews.database.connection import DatabaseManager, get_db_manager
from movie_reviews.database.movies_dao import MoviesDAO

logger = logging.getLogger(__name__)


def get_database_manager() -> DatabaseManager:
    """Return the process-wide DatabaseManager for FastAPI Depends()."""
    return get_db_manager()


# Singleton movies DAO
_movies_dao: MoviesDAO | None = None


def get_movies_dao() -> MoviesDAO:
    """Get or create the singleton MoviesDAO, injecting the collection on first use."""
    global _movies_dao
    if _movies_dao is None:
        _movies_dao = MoviesDAO()
        _movies_dao.inject_db(get_db_manager().client, get_database_name())
    return _movies_dao


def reset_movies_dao() -> None:
    """Forget the singleton DAO (used on shutdown)."""
    global _movies_dao
    _movies_dao = None
