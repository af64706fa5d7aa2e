"""
Exceptions raised by the data access layer.
"""


class MoviesDAOError(Exception):
    """Base class for movie data access failures."""


class DAONotInitializedError(MoviesDAOError):
    """The movies collection handle was used before inject_db succeeded."""

    def __init__(self):
        super().__init__("movies collection is not initialized")


class InvalidMovieIdError(MoviesDAOError, ValueError):
    """A movie id could not be converted to an ObjectId."""

    def __init__(self, movie_id):
        self.movie_id = movie_id
        super().__init__(f"invalid movie id: {movie_id!r}")


class MovieNotFoundError(MoviesDAOError):
    """No movie matches the requested id."""

    def __init__(self, movie_id: str):
        self.movie_id = movie_id
        super().__init__(f"movie {movie_id} not found")
