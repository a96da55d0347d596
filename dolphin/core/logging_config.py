"""
Structured JSON logging configuration.

This module sets up library-wide JSON logging with:
- Consistent field names across all logs
- Entity and operation tracking for repository calls
- Affected-row counts for mutating operations
- Timestamp, level, message, logger name

Logs are output to stdout in JSON format for easy parsing by
log aggregation systems (CloudWatch, Datadog, etc.).
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dolphin.core.config import settings


# LogRecord attributes that are never copied into the JSON payload
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
    - timestamp: ISO 8601 format with microseconds (UTC)
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - message: Log message
    - logger: Logger name (module path)
    - entity: Mapped entity class name (if available)
    - operation: Repository operation name (if available)
    - key: Primary key involved in the call (if available)
    - affected: Affected-row count reported by the store (if available)
    - exception: Exception details (if exception occurred)
    - extra: Any additional fields from log record

    Example output:
        {"timestamp": "2025-11-24T10:30:00.123456+00:00", "level": "DEBUG",
         "message": "Delete committed", "logger": "dolphin.repositories.minimal",
         "entity": "Foo", "operation": "delete", "affected": 1}
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
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data["stack_info"] = self.formatStack(record.stack_info)

        # Fields passed via logger.debug("msg", extra={...})
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key in log_data or value is None:
                continue
            log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None
) -> None:
    """
    Configure logging for applications embedding the library.

    Sets up:
    - Root logger with specified level
    - JSON formatter (if json_format=True)
    - StreamHandler to stdout
    - Removes default handlers

    Args:
        level: Logging level name, defaults to settings.log_level
        json_format: Use JSON formatter, defaults to settings.log_json

    Example:
        setup_logging(level="DEBUG", json_format=False)

    Note:
        Call this once at application startup, before any logging occurs.
    """
    if level is None:
        level = settings.log_level
    if json_format is None:
        json_format = settings.log_json

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
        # Simple format for development/debugging
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


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance with given name.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    entity: Optional[str] = None,
    operation: Optional[str] = None,
    key: Any = None,
    affected: Optional[int] = None,
    exc_info: Any = None,
    **extra_fields: Any
) -> None:
    """
    Log message with structured repository context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        entity: Entity class name
        operation: Repository operation name
        key: Primary key involved in the call
        affected: Affected-row count
        exc_info: Exception to attach (passed through to the logger)
        **extra_fields: Additional fields to include

    Example:
        log_with_context(
            logger,
            "warning",
            "Save failed",
            entity="Foo",
            operation="save",
            exc_info=exc,
        )
    """
    extra: Dict[str, Any] = {}

    if entity is not None:
        extra["entity"] = entity
    if operation is not None:
        extra["operation"] = operation
    if key is not None:
        extra["key"] = key
    if affected is not None:
        extra["affected"] = affected

    extra.update(extra_fields)

    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra, exc_info=exc_info)
