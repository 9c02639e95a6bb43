"""
Tests for the logging helpers.
"""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from utilities.logger import AccessLogger, setup_logging


@pytest.fixture
def restore_logging():
    """Undo global logging configuration after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_setup_logging_writes_log_file(tmp_path, restore_logging):
    """Test that a log file is created when requested."""
    log_file = tmp_path / "logs" / "api.log"

    setup_logging(log_level="INFO", log_format="json", log_file=log_file)

    assert log_file.exists()
    assert "Logging system initialized" in log_file.read_text()


@pytest.mark.parametrize("status_code,level", [
    (200, "info"),
    (404, "warning"),
    (500, "error"),
])
def test_log_request_level(status_code, level):
    """Test that the level follows the response status."""
    with capture_logs() as logs:
        AccessLogger().log_request("GET", "/books", status_code, 1.234)

    assert logs == [{
        "event": "Request handled",
        "log_level": level,
        "method": "GET",
        "path": "/books",
        "status_code": status_code,
        "duration_ms": 1.23,
    }]


def test_log_store_operation():
    """Test the store mutation line."""
    with capture_logs() as logs:
        AccessLogger("api.books").log_store_operation("create", 5)

    assert logs == [{
        "event": "Store operation",
        "log_level": "info",
        "operation": "create",
        "book_id": 5,
    }]


def test_shared_logger_keeps_no_state_between_calls():
    """Test that one instance can serve many requests without carrying fields over."""
    access = AccessLogger()

    with capture_logs() as logs:
        access.log_request("POST", "/books", 200, 1.0)
        access.log_store_operation("delete", 2)

    assert set(logs[0]) == {"event", "log_level", "method", "path", "status_code", "duration_ms"}
    assert set(logs[1]) == {"event", "log_level", "operation", "book_id"}
