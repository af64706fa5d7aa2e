"""
Movie filters and the MongoDB queries built from them.

A request narrows the movie list by at most one criterion, so the filter is
a closed set of variants rather than a free-form dict.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class NoFilter:
    """Match every movie."""

    def as_dict(self) -> Dict[str, str]:
        return {}


@dataclass(frozen=True)
class ByTitle:
    """Text search over the indexed title field."""

    title: str

    def as_dict(self) -> Dict[str, str]:
        return {"title": self.title}


@dataclass(frozen=True)
class ByRating:
    """Exact match on the rated field."""

    rated: str

    def as_dict(self) -> Dict[str, str]:
        return {"rated": self.rated}


MovieFilter = Union[NoFilter, ByTitle, ByRating]


def resolve_filter(rated: Optional[str] = None, title: Optional[str] = None) -> MovieFilter:
    """
    Pick the filter for a request.
    
    Rated takes precedence when both are supplied; empty strings count as absent.
    
    Args:
        rated: Rating value from the query string
        title: Title search phrase from the query string
        
    Returns:
        One of NoFilter, ByRating, ByTitle
    """
    if rated:
        return ByRating(rated)
    if title:
        return ByTitle(title)
    return NoFilter()


def build_movie_query(movie_filter: MovieFilter) -> Dict[str, Any]:
    """
    Translate a filter into a MongoDB find query.
    
    Raises:
        TypeError: If movie_filter is not a known filter variant
    """
    if isinstance(movie_filter, ByTitle):
        return {"$text": {"$search": movie_filter.title}}
    if isinstance(movie_filter, ByRating):
        return {"rated": {"$eq": movie_filter.rated}}
    if isinstance(movie_filter, NoFilter):
        return {}
    raise TypeError(f"Unsupported movie filter: {movie_filter!r}")


def build_movie_with_reviews_pipeline(movie_oid) -> list:
    """Aggregation pipeline matching one movie and attaching its reviews."""
    return [
        {"$match": {"_id": movie_oid}},
        {
            "$lookup": {
                "from": "reviews",
                "localField": "_id",
                "foreignField": "movie_id",
                "as": "reviews",
            }
        },
    ]
