"""
Tests for logging setup.
"""

import logging

import pytest

from movie_reviews.utils.logging_config import configure_api_logging, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only():
    setup_logging(level="debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert logging.getLogger("pymongo").level == logging.WARNING


def test_rotating_file(tmp_path):
    setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path))
    logging.getLogger("movie_reviews.test").info("hello")

    assert len(logging.getLogger().handlers) == 2
    assert "hello" in (tmp_path / "api.log").read_text()


def test_level_and_file_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_FILE", "env.log")

    setup_logging(log_dir=str(tmp_path))

    assert logging.getLogger().level == logging.WARNING
    assert (tmp_path / "env.log").exists()


def test_repeated_setup_does_not_stack_handlers():
    configure_api_logging()
    configure_api_logging()

    assert len(logging.getLogger().handlers) == 1
