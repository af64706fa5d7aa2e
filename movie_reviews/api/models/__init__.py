"""
Pydantic schemas for API responses.
"""

from movie_reviews.api.models.movie import MovieListResponse, ErrorResponse, encode_document

__all__ = [
    "MovieListResponse",
    "ErrorResponse",
    "encode_document",
]
