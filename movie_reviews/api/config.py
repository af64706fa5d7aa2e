"""
API configuration loaded from environment or defaults.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def get_database_uri() -> str:
    """Get MongoDB connection string from env or default."""
    return os.getenv("MOVIEREVIEWS_DB_URI", "") or "mongodb://localhost:27017"


def get_database_name() -> str:
    """Get the database namespace holding the movies and reviews collections."""
    return os.getenv("MOVIEREVIEWS_NS", "") or "sample_mflix"


def get_server_selection_timeout_ms() -> int:
    """Get how long the client waits to find a usable server."""
    return int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000"))


def get_max_movies_per_page() -> Optional[int]:
    """Get the optional upper bound on moviesPerPage (unset means no cap)."""
    value = os.getenv("MAX_MOVIES_PER_PAGE", "").strip()
    if not value:
        return None
    try:
        cap = int(value)
    except ValueError:
        logger.warning("Ignoring non-numeric MAX_MOVIES_PER_PAGE=%r", value)
        return None
    return cap if cap > 0 else None


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name from env (console only when unset)."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
