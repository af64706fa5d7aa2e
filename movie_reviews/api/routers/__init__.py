"""
API route handlers.
"""

from movie_reviews.api.routers import movies, system

__all__ = ["movies", "system"]
