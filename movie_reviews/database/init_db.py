"""
Database initialization and index verification.

The title text index is required by title searches and the movie_id index
keeps the reviews lookup from scanning the whole collection.
"""

import logging

from pymongo import ASCENDING, TEXT

from movie_reviews.database.connection import DatabaseManager

logger = logging.getLogger(__name__)

TITLE_TEXT_INDEX = "title_text"
REVIEWS_MOVIE_ID_INDEX = "movie_id_1"


def init_database(db_manager: DatabaseManager, namespace: str = None) -> DatabaseManager:
    """
    Create the indexes the read paths rely on.
    
    create_index is a no-op when an identical index already exists.
    
    Args:
        db_manager: DatabaseManager instance
        namespace: Database name (default: the manager's configured namespace)
        
    Returns:
        DatabaseManager instance
    """
    db = db_manager.get_database(namespace)
    db["movies"].create_index([("title", TEXT)], name=TITLE_TEXT_INDEX)
    db["reviews"].create_index([("movie_id", ASCENDING)], name=REVIEWS_MOVIE_ID_INDEX)
    logger.info("Indexes ensured on %s", db.name)
    return db_manager


def verify_schema(db_manager: DatabaseManager, namespace: str = None) -> bool:
    """
    Verify that both collections exist and titles are text-indexed.
    
    Args:
        db_manager: DatabaseManager instance
        namespace: Database name (default: the manager's configured namespace)
        
    Returns:
        True if the schema is usable, False otherwise
    """
    db = db_manager.get_database(namespace)
    existing = set(db.list_collection_names())
    missing = {"movies", "reviews"} - existing
    if missing:
        logger.warning("Missing collections: %s", sorted(missing))
        return False
    
    if TITLE_TEXT_INDEX not in db["movies"].index_information():
        logger.warning("Missing text index %s on movies", TITLE_TEXT_INDEX)
        return False
    
    logger.info("All collections exist: %s", sorted(existing))
    return True
