"""
Movie Reviews API application package.

This package contains the read-only REST API over the movie reviews
MongoDB database: data access, request handling, and utilities.
"""

__version__ = "1.0.0"
