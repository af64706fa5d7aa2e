"""
Error handlers mapping data access failures to HTTP responses.

Every error body has the shape {"error": <message>}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from movie_reviews.database.errors import MovieNotFoundError, MoviesDAOError

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register the movie error handlers on the FastAPI application."""

    @app.exception_handler(MovieNotFoundError)
    async def handle_movie_not_found(_request: Request, exc: MovieNotFoundError) -> JSONResponse:
        logger.warning("Movie not found: %s", exc.movie_id)
        return _error_response(HTTP_404, "not found")

    @app.exception_handler(MoviesDAOError)
    async def handle_dao_error(_request: Request, exc: MoviesDAOError) -> JSONResponse:
        logger.error("api, %s", exc)
        return _error_response(HTTP_500, str(exc))

    @app.exception_handler(PyMongoError)
    async def handle_store_error(_request: Request, exc: PyMongoError) -> JSONResponse:
        logger.error("api, %s", exc, exc_info=exc)
        return _error_response(HTTP_500, str(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("api, unexpected %s: %s", type(exc).__name__, exc)
        return _error_response(HTTP_500, str(exc))
