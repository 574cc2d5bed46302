"""Tests for logging configuration helpers."""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock

import pytest

from view_renderer.logging_config import get_logger, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_console_only(restore_root_logger):
    """Test that no file handler is added without a log directory."""
    root = setup_logging("warning")

    assert root.level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.NOTSET
    assert len(root.handlers) == 1
    assert not any(isinstance(h, RotatingFileHandler) for h in root.handlers)


def test_setup_logging_with_log_dir(restore_root_logger, tmp_path):
    """Test that a rotating JSON file handler is added for a log directory."""
    log_dir = tmp_path / "logs"

    root = setup_logging("INFO", log_dir)

    file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert log_dir.is_dir()
    assert file_handlers[0].maxBytes == 10 * 1024 * 1024
    assert file_handlers[0].backupCount == 5


def test_get_logger():
    """Test get_logger returns a named logger."""
    assert get_logger("view_renderer.test").name == "view_renderer.test"


def test_log_with_context_passes_fields():
    """Test that structured fields and exc_info reach the logger."""
    logger = MagicMock(spec=logging.Logger)
    error = RuntimeError("boom")

    log_with_context(logger, "WARNING", "Something failed", exc_info=error, event_type="test_event")

    logger.warning.assert_called_once_with("Something failed", exc_info=error, extra={"event_type": "test_event"})


def test_log_with_context_emits_record(caplog):
    """Test that extra fields end up on the log record."""
    logger = get_logger("view_renderer.test_emit")

    with caplog.at_level(logging.INFO, logger="view_renderer.test_emit"):
        log_with_context(logger, "info", "Rendered", template="view.html")

    assert caplog.records[0].template == "view.html"
    assert caplog.records[0].exc_info is None
