"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from movie_reviews.api.dependencies import get_database_manager, get_movies_dao
from movie_reviews.database.connection import DatabaseManager
from movie_reviews.database.movies_dao import MoviesDAO

router = APIRouter(prefix="/api/v1", tags=["system"])


@router.get("/health")
def health_check(
    db_manager: DatabaseManager = Depends(get_database_manager),
    dao: MoviesDAO = Depends(get_movies_dao),
):
    """Health check: database reachable and movies collection injected."""
    try:
        db_manager.ping()
    except PyMongoError as e:
        return {"status": "unhealthy", "database": str(e), "movies_ready": dao.is_ready}
    return {
        "status": "healthy",
        "database": "connected",
        "movies_ready": dao.is_ready,
    }
