"""
Read operations over the movies collection.

The list and ratings lookups are fail-soft: store errors are logged and an
empty result is returned. The single-movie lookup propagates errors to the
caller instead.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import BSONError, InvalidId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from movie_reviews.database.errors import DAONotInitializedError, InvalidMovieIdError
from movie_reviews.database.queries import (
    MovieFilter,
    NoFilter,
    build_movie_query,
    build_movie_with_reviews_pipeline,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 0
DEFAULT_MOVIES_PER_PAGE = 20


@dataclass
class MoviesPage:
    """One page of movies plus the size of the whole filtered set."""

    movies: List[Dict[str, Any]] = field(default_factory=list)
    total_results: int = 0


class MoviesDAO:
    """
    Data access object for the movies collection.
    
    The collection handle is set once by inject_db and read by every
    operation afterwards.
    """
    
    def __init__(self):
        self._movies: Optional[Collection] = None
        self._lock = threading.Lock()
    
    @property
    def is_ready(self) -> bool:
        """True once inject_db has resolved the collection."""
        return self._movies is not None
    
    @property
    def movies(self) -> Collection:
        if self._movies is None:
            raise DAONotInitializedError()
        return self._movies
    
    def inject_db(self, client, namespace: str) -> None:
        """
        Resolve and cache the movies collection.
        
        The first successful call wins; later calls are no-ops. A failure is
        logged and leaves the handle unset.
        
        Args:
            client: MongoClient (or compatible) connection
            namespace: Database name holding the movies collection
        """
        with self._lock:
            if self._movies is not None:
                return
            try:
                self._movies = client[namespace]["movies"]
            except (PyMongoError, TypeError) as e:
                logger.error("Unable to connect in MoviesDAO: %s", e)
                return
        logger.info("MoviesDAO connected to %s.movies", namespace)
    
    def get_movies(
        self,
        movie_filter: MovieFilter = NoFilter(),
        page: int = DEFAULT_PAGE,
        movies_per_page: int = DEFAULT_MOVIES_PER_PAGE,
    ) -> MoviesPage:
        """
        Get one page of movies matching a filter.
        
        Args:
            movie_filter: NoFilter, ByTitle or ByRating
            page: Zero-based page number
            movies_per_page: Maximum number of movies to return
            
        Returns:
            MoviesPage; empty with total_results=0 if the store call fails
        """
        query = build_movie_query(movie_filter)
        try:
            cursor = (
                self.movies.find(query)
                .skip(movies_per_page * page)
                .limit(movies_per_page)
            )
            movies_list = list(cursor)
            total = self.movies.count_documents(query)
        except (PyMongoError, BSONError, OverflowError, DAONotInitializedError) as e:
            logger.error("Unable to issue find command, %s", e)
            return MoviesPage()
        
        logger.debug(
            "Fetched %d movies (page %d, total %d) with query: %s",
            len(movies_list), page, total, query,
        )
        return MoviesPage(movies=movies_list, total_results=total)
    
    def get_movie_by_id(self, movie_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a movie with its reviews embedded under "reviews".
        
        Args:
            movie_id: 24-character hex ObjectId string
            
        Returns:
            Movie document, or None if no movie has that id
            
        Raises:
            InvalidMovieIdError: If movie_id is not a valid ObjectId
            DAONotInitializedError: If inject_db has not succeeded
            pymongo.errors.PyMongoError: If the aggregation fails
        """
        try:
            oid = ObjectId(movie_id)
        except (InvalidId, TypeError) as e:
            logger.error("Something went wrong in get_movie_by_id: %s", e)
            raise InvalidMovieIdError(movie_id) from e
        
        try:
            cursor = self.movies.aggregate(build_movie_with_reviews_pipeline(oid))
            return next(iter(cursor), None)
        except (PyMongoError, DAONotInitializedError) as e:
            logger.error("Something went wrong in get_movie_by_id: %s", e)
            raise
    
    def get_ratings(self) -> List[str]:
        """
        Get the distinct values of the rated field.
        
        Returns:
            List of ratings in store order; empty if the store call fails
        """
        try:
            return list(self.movies.distinct("rated"))
        except (PyMongoError, DAONotInitializedError) as e:
            logger.error("Unable to get ratings, %s", e)
            return []
