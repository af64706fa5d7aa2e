"""
Database module for the movie reviews service.

This module provides connection management, query construction and the
read-only data access object for the MongoDB movies and reviews collections.
"""

from movie_reviews.database.connection import DatabaseManager, get_db_manager, close_db_manager
from movie_reviews.database.errors import (
    MoviesDAOError,
    DAONotInitializedError,
    InvalidMovieIdError,
    MovieNotFoundError,
)
from movie_reviews.database.init_db import init_database, verify_schema
from movie_reviews.database.movies_dao import MoviesDAO, MoviesPage
from movie_reviews.database.queries import NoFilter, ByTitle, ByRating, MovieFilter

__all__ = [
    # Connection
    'DatabaseManager',
    'get_db_manager',
    'close_db_manager',
    # Errors
    'MoviesDAOError',
    'DAONotInitializedError',
    'InvalidMovieIdError',
    'MovieNotFoundError',
    # Initialization
    'init_database',
    'verify_schema',
    # Data access
    'MoviesDAO',
    'MoviesPage',
    # Filters
    'NoFilter',
    'ByTitle',
    'ByRating',
    'MovieFilter',
]
