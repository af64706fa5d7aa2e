"""
Pydantic schemas for Movie API.
"""

from typing import Any, Dict, List

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field


def encode_document(document: Any) -> Any:
    """Make a MongoDB document JSON-safe (ObjectId values become hex strings)."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


class MovieListResponse(BaseModel):
    """Response model for one page of movies."""

    movies: List[Dict[str, Any]]
    page: int
    filters: Dict[str, str] = Field(default_factory=dict)
    entries_per_page: int
    total_results: int


class ErrorResponse(BaseModel):
    """Body returned with 404 and 500 responses."""

    error: str
