"""
Logging configuration for the movie reviews service.

Console output is always on; a rotating file under logs/ is added when a
log file name is configured (LOG_FILE).
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from movie_reviews.api.config import get_log_file, get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Libraries that log every heartbeat/connection event at INFO/DEBUG
NOISY_LOGGERS = ('pymongo', 'urllib3', 'uvicorn.access')


def _build_file_handler(log_dir: str, log_file: str, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    """Create the rotating file handler, making log_dir if needed."""
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        log_path / log_file,
        maxBytes=max_bytes,
        backupCount=backup_count
    )


def setup_logging(
    log_file: Optional[str] = None,
    level: Optional[str] = None,
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Configure the root logger.
    
    Args:
        log_file: Name of log file under log_dir (default: LOG_FILE, console only if unset)
        level: Logging level name (default: LOG_LEVEL)
        log_dir: Directory for log files (default: 'logs')
        max_bytes: Maximum size of log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)
    """
    log_file = log_file if log_file is not None else get_log_file()
    numeric_level = getattr(logging, (level or get_log_level()).upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(_build_file_handler(log_dir, log_file, max_bytes, backup_count))
    
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    # Replace, don't stack, when called again (e.g. app reload)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    
    if log_file:
        root_logger.info("Logging to file: %s", Path(log_dir) / log_file)
    
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def configure_api_logging():
    """Configure logging for the API process from LOG_LEVEL and LOG_FILE."""
    setup_logging(log_dir="logs")
