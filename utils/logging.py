"""
Logging Utility - Structured JSON Logging

Provides centralized, structured logging configuration for all backend components.
Supports JSON format for production and human-readable format for development.

Usage:
    import logging

    from utils.logging import setup_logging

    setup_logging(level="INFO", format_type="json")
    logger = logging.getLogger(__name__)
    logger.info("Batch transformed", extra={"total": 500, "failed": 0})
"""

import logging
import sys
from typing import Any

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def json_formatter() -> JsonFormatter:
    """Build the JSON formatter; extra fields are emitted as top-level keys."""
    return JsonFormatter(
        JSON_FORMAT,
        rename_fields={"asctime": "ts", "levelname": "level", "name": "logger"},
    )


def setup_logging(
    level: str = "INFO",
    format_type: str = "json",
    stream: Any = None,
) -> None:
    """Configure application-wide logging.

    Replaces any handlers already installed on the root logger, so calling it
    again (e.g. on a warm Lambda container) does not duplicate output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: Log format ('json' or 'text')
        stream: Output stream, defaults to stdout
    """
    handler = logging.StreamHandler(stream or sys.stdout)
    if format_type == "json":
        handler.setFormatter(json_formatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
