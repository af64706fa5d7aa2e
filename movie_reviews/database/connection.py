"""
Database connection management using pymongo.

This module owns the process-wide MongoClient and hands out database
handles to the data access layer.
"""

from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database

from movie_reviews.api.config import (
    get_database_name,
    get_database_uri,
    get_server_selection_timeout_ms,
)


class DatabaseManager:
    """
    Database connection manager.
    
    Wraps a single MongoClient. pymongo pools connections internally and the
    client is safe to share between threads.
    """
    
    def __init__(
        self,
        uri: Optional[str] = None,
        database_name: Optional[str] = None,
        client: Optional[MongoClient] = None,
    ):
        """
        Initialize database manager.
        
        Args:
            uri: MongoDB connection string (default: from MOVIEREVIEWS_DB_URI)
            database_name: Namespace holding movies/reviews (default: from MOVIEREVIEWS_NS)
            client: Pre-built client, e.g. a mongomock client in tests
        """
        self.uri = uri or get_database_uri()
        self.database_name = database_name or get_database_name()
        
        # MongoClient connects lazily, so construction never blocks on the server
        self.client = client if client is not None else MongoClient(
            self.uri,
            serverSelectionTimeoutMS=get_server_selection_timeout_ms(),
        )
    
    def get_database(self, name: Optional[str] = None) -> Database:
        """Get a database handle (defaults to the configured namespace)."""
        return self.client[name or self.database_name]
    
    def ping(self) -> dict:
        """
        Round-trip to the server.
        
        Raises:
            pymongo.errors.PyMongoError: If the server cannot be reached
        """
        return self.client.admin.command("ping")
    
    def close(self):
        """Close the client and all pooled connections."""
        self.client.close()


# Global database manager instance (singleton pattern)
_db_manager = None


def get_db_manager(uri: Optional[str] = None, database_name: Optional[str] = None) -> DatabaseManager:
    """
    Get or create the global database manager instance.
    
    Args:
        uri: MongoDB connection string
        database_name: Database namespace
        
    Returns:
        DatabaseManager instance
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(uri=uri, database_name=database_name)
    return _db_manager


def close_db_manager() -> None:
    """Close and forget the global database manager."""
    global _db_manager
    if _db_manager is not None:
        _db_manager.close()
        _db_manager = None
