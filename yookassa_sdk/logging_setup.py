"""
Structured JSON Logging for YooKassa SDK

Provides a JSON formatter for structured logging output and helpers that keep
credentials out of log records.
"""

import logging
import sys
import json
from typing import Any, Dict, Mapping

REDACTED = "***REDACTED***"

_EXTRA_FIELDS = ("operation", "endpoint", "status_code")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with timestamp, logger name, level, message
        """
        payload: Dict[str, Any] = {
            "ts": int(record.created * 1000),  # milliseconds
            "name": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)

        return json.dumps(payload, default=str)


def setup_structured_logger(level: int = logging.INFO) -> None:
    """
    Configure structured JSON logging for the SDK.

    Args:
        level: Logging level (default: logging.INFO)

    Example:
        >>> from yookassa_sdk.logging_setup import setup_structured_logger
        >>> setup_structured_logger(logging.DEBUG)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    sdk_logger = logging.getLogger("yookassa_sdk")
    sdk_logger.setLevel(level)
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = False


def sanitize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Redact secret-bearing headers before logging.

    Example:
        >>> sanitize_headers({"Authorization": "Basic abc", "Idempotence-Key": "k"})
        {'Authorization': '***REDACTED***', 'Idempotence-Key': 'k'}
    """
    sensitive = {"authorization", "cookie", "proxy-authorization"}
    return {
        key: REDACTED if key.lower() in sensitive else value
        for key, value in headers.items()
    }
