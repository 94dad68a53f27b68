"""
Structured JSON logging configuration.

This module sets up application-wide JSON logging with:
- Consistent field names across all logs
- Data-access context (operation name, bound parameters, row counts)
- Timestamp, level, message, logger name

Logs are output to stdout in JSON format for easy parsing by
log aggregation systems.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional


# Attributes every LogRecord carries; anything else came in through ``extra``
_RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName",
})


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.

    Outputs log records as single-line JSON objects with consistent fields:
    - timestamp: ISO 8601 format with microseconds
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - message: Log message
    - logger: Logger name (module path)
    - operation: Data-access operation name (if available)
    - params: Bound query parameters (if available)
    - row_count: Number of rows returned (if available)
    - exception: Exception details (if exception occurred)
    - extra: Any additional fields from log record

    Example output:
        {"timestamp": "2025-11-24T10:30:00.123456", "level": "DEBUG",
         "message": "Property search built", "logger": "lightbnb.repositories.properties",
         "operation": "get_all_properties", "params": ["%Van%", 10]}
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON string.

        Args:
            record: LogRecord to format

        Returns:
            JSON string representation of log record
        """
        log_data: Dict[str, Any] = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data["stack_info"] = self.formatStack(record.stack_info)

        for field in ("operation", "params", "row_count"):
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        # default=str covers dates and Decimals in bound parameters
        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True
) -> None:
    """
    Configure application logging.

    Sets up:
    - Root logger with specified level
    - JSON formatter (if json_format=True)
    - StreamHandler to stdout
    - Removes default handlers

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON formatter (True) or simple formatter (False)

    Note:
        Call this once at process startup, before any logging occurs.
    """
    root_logger = logging.getLogger()

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance with given name.

    Example:
        logger = get_logger(__name__)
        logger.info("User created", extra={"operation": "add_user"})
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    operation: Optional[str] = None,
    params: Optional[list] = None,
    row_count: Optional[int] = None,
    **extra_fields: Any
) -> None:
    """
    Log message with structured data-access context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        operation: Data-access operation name
        params: Positional query parameters
        row_count: Rows returned by the statement
        **extra_fields: Additional fields to include

    Example:
        log_with_context(
            logger,
            "debug",
            "Property search built",
            operation="get_all_properties",
            params=["%Vancouver%", 10],
        )
    """
    extra: Dict[str, Any] = {}

    if operation is not None:
        extra["operation"] = operation
    if params is not None:
        extra["params"] = params
    if row_count is not None:
        extra["row_count"] = row_count

    extra.update(extra_fields)

    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra)
