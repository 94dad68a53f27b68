"""
Tests for structured JSON logging configuration.

This module tests:
- JSONFormatter (JSON log output)
- setup_logging() (logging configuration)
- log_with_context() (data-access context fields)

Tests follow AAA (Arrange, Act, Assert) pattern.
"""

import io
import json
import logging
from datetime import date
from decimal import Decimal

import pytest

from lightbnb.core.logging_config import (
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)


@pytest.fixture
def json_stream():
    """Logger writing JSON lines into a StringIO."""
    logger = logging.getLogger("test_lightbnb_json")
    logger.setLevel(logging.DEBUG)
    logger.handlers = []
    logger.propagate = False

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

    yield logger, stream

    logger.handlers = []
    logger.propagate = True


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_basic_message(self, json_stream):
        """
        Test JSONFormatter outputs valid JSON.

        Arrange: Logger with JSONFormatter
        Act: Log a message
        Assert: Output is valid JSON with required fields
        """
        # Arrange
        logger, stream = json_stream

        # Act
        logger.info("Test message")

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        assert log_data["level"] == "INFO"
        assert log_data["message"] == "Test message"
        assert log_data["logger"] == "test_lightbnb_json"
        assert "timestamp" in log_data

    def test_extra_fields_and_non_json_values(self, json_stream):
        logger, stream = json_stream

        logger.debug(
            "Search built",
            extra={"operation": "get_all_properties", "params": ["%Van%", Decimal("4.5"), date(2024, 1, 2)]},
        )

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["operation"] == "get_all_properties"
        assert log_data["params"] == ["%Van%", "4.5", "2024-01-02"]

    def test_exception_included(self, json_stream):
        logger, stream = json_stream

        try:
            raise RuntimeError("connection lost")
        except RuntimeError:
            logger.exception("Query failed")

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["level"] == "ERROR"
        assert "RuntimeError: connection lost" in log_data["exception"]


class TestLogWithContext:
    """Tests for the context logging helper."""

    def test_context_fields(self, json_stream):
        logger, stream = json_stream

        log_with_context(
            logger,
            "info",
            "Reservations fetched",
            operation="get_all_reservations",
            row_count=2,
            guest_id=3,
        )

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["operation"] == "get_all_reservations"
        assert log_data["row_count"] == 2
        assert log_data["guest_id"] == 3
        assert "params" not in log_data


class TestSetupLogging:
    """Tests for root logger configuration."""

    def test_json_handler_installed(self, restore_root_logger):
        setup_logging(level="WARNING", json_format=True)

        root = restore_root_logger
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_plain_formatter(self, restore_root_logger):
        setup_logging(level="debug", json_format=False)

        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_get_logger_returns_named_logger(self):
        assert get_logger("lightbnb.db").name == "lightbnb.db"
