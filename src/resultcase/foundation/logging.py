"""Package logging on top of the stdlib logging module.

Every logger lives under the ``resultcase`` namespace so applications can
route or silence the package in one place. Nothing is emitted until a record
passes the logger's level; configure_logging() is optional.

Example:
    >>> from resultcase.foundation.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", format="json")
    >>> get_logger("monads").debug("captured ValueError")
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

from .config import get_settings

ROOT_LOGGER = "resultcase"

# Marks the handler installed by configure_logging so reconfiguring replaces it
_HANDLER_ATTR = "_resultcase_handler"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the resultcase namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    level: str | None = None,
    format: str | None = None,  # noqa: A002 - matches LoggingSettings.format
    *,
    output: TextIO | None = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Args:
        level: Minimum level (default from RESULTCASE_LOG_LEVEL)
        format: "text" or "json" (default from RESULTCASE_LOG_FORMAT)
        output: Target stream (default stderr)

    Returns:
        The configured ``resultcase`` logger

    Raises:
        ValueError: On an unknown format
    """
    settings = get_settings().logging
    level = (level or settings.level).upper()
    format = format or settings.format  # noqa: A001

    formatter: logging.Formatter
    if format == "text":
        formatter = logging.Formatter(_TEXT_FORMAT)
    elif format == "json":
        formatter = JsonFormatter()
    else:
        raise ValueError(f"Unknown format: {format}. Use 'text' or 'json'")

    logger = get_logger()
    for existing in [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]:
        logger.removeHandler(existing)
        existing.close()

    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.WARNING))
    return logger
