"""
FastAPI application entry point for the Movie Reviews API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_reviews.api.config import get_api_host, get_api_port
from movie_reviews.api.dependencies import get_movies_dao, reset_movies_dao
from movie_reviews.api.errors import register_error_handlers
from movie_reviews.api.routers import movies, system
from movie_reviews.database.connection import close_db_manager
from movie_reviews.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Inject the movies collection before serving; close the client on shutdown."""
    configure_api_logging()
    dao = get_movies_dao()
    if not dao.is_ready:
        logger.warning("Movies collection unavailable; movie endpoints will fail")
    yield
    reset_movies_dao()
    close_db_manager()


app = FastAPI(
    title="Movie Reviews API",
    description="Read-only REST API over the movie reviews database",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Reviews API",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def run():
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("movie_reviews.api.main:app", host=get_api_host(), port=get_api_port())


if __name__ == "__main__":
    run()
