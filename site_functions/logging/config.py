"""Logging configuration with JSON formatting."""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any

from site_functions.config import settings


class JSONFormatter(logging.Formatter):
    """
    Formatter that renders each log record as a single JSON line.

    Fields:
    - timestamp: ISO 8601 timestamp in UTC
    - level: Log level name
    - logger: Logger name
    - message: Rendered log message
    - function: Lambda function name, when running on Lambda
    - correlation_id: Request correlation ID (if passed in extra)
    - everything in the `context` dict passed in extra
    """

    def __init__(self) -> None:
        super().__init__()
        self._function_name = os.getenv("AWS_LAMBDA_FUNCTION_NAME")

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self._function_name:
            log_data["function"] = self._function_name

        if getattr(record, "correlation_id", None):
            log_data["correlation_id"] = record.correlation_id

        if hasattr(record, "context"):
            log_data.update(record.context)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.levelno == logging.DEBUG:
            log_data["file"] = record.pathname
            log_data["line"] = record.lineno

        # default=str keeps datetimes and exceptions in context serialisable
        return json.dumps(log_data, default=str)


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger to emit JSON lines on stdout.

    Called once per cold start. Any handlers installed by the runtime
    (the Lambda bootstrap adds its own) are replaced.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    # httpx logs every request line at INFO, including HubSpot URLs
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))

    root_logger.info(
        "Logging configured",
        extra={"context": {"log_level": level_name}},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
