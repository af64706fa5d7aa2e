"""
Movie API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from movie_reviews.api.config import get_max_movies_per_page
from movie_reviews.api.dependencies import get_movies_dao
from movie_reviews.api.models.movie import ErrorResponse, MovieListResponse, encode_document
from movie_reviews.database.errors import MovieNotFoundError
from movie_reviews.database.movies_dao import DEFAULT_MOVIES_PER_PAGE, DEFAULT_PAGE, MoviesDAO
from movie_reviews.database.queries import resolve_filter

# Largest value a BSON int64 (skip/limit) can carry
MAX_INT64 = 2 ** 63 - 1

router = APIRouter(prefix="/api/v1/movies", tags=["movies"])


def parse_int(value: Optional[str], default: int, minimum: int = 0, maximum: int = MAX_INT64) -> int:
    """Parse a query-string integer, falling back to default when absent, invalid or out of range."""
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if minimum <= parsed <= maximum else default


@router.get("", response_model=MovieListResponse)
def list_movies(
    rated: Optional[str] = Query(None),
    title: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    movies_per_page: Optional[str] = Query(None, alias="moviesPerPage"),
    dao: MoviesDAO = Depends(get_movies_dao),
):
    """List movies with pagination, filtered by rating or title search."""
    per_page = parse_int(movies_per_page, DEFAULT_MOVIES_PER_PAGE, minimum=1)
    cap = get_max_movies_per_page()
    if cap is not None:
        per_page = min(per_page, cap)
    page_number = parse_int(page, DEFAULT_PAGE)
    movie_filter = resolve_filter(rated=rated, title=title)

    result = dao.get_movies(movie_filter, page=page_number, movies_per_page=per_page)
    return MovieListResponse(
        movies=encode_document(result.movies),
        page=page_number,
        filters=movie_filter.as_dict(),
        entries_per_page=per_page,
        total_results=result.total_results,
    )


@router.get("/ratings", responses={500: {"model": ErrorResponse}})
def get_ratings(dao: MoviesDAO = Depends(get_movies_dao)):
    """List the distinct rated values across all movies."""
    return encode_document(dao.get_ratings())


@router.get(
    "/id/{movie_id}",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_movie(movie_id: str, dao: MoviesDAO = Depends(get_movies_dao)):
    """Get movie details by ID, with its reviews embedded."""
    movie = dao.get_movie_by_id(movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return encode_document(movie)
