"""Logging setup for latencyprobe.

The ``latencyprobe`` logger only carries a NullHandler until one of the
helpers below attaches a real one. A run logs its start and finish at INFO,
each failed iteration at WARNING and each timing at DEBUG.

Environment variables read by configure_from_env():
    LP_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    LP_LOG_FILE: Write to this file instead of stderr
    LP_LOG_JSON: Set to "1" for one JSON object per line
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal, Mapping

__all__ = [
    "configure_from_env",
    "enable_console_logging",
    "setup_logging",
]

LOGGER_NAME = "latencyprobe"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

# Attributes MeasurementSession attaches through ``extra=``
RECORD_FIELDS = ("iteration", "elapsed_ms")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Formats each record as a single JSON line.

    Iteration number and elapsed time are copied into the object when the
    record carries them, so failed iterations can be filtered downstream.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in RECORD_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(
    level: LogLevel | int = "INFO",
    log_file: str | Path | None = None,
    json_format: bool = False,
) -> logging.Handler:
    """Attach one handler to the ``latencyprobe`` logger.

    Args:
        level: Level name or logging constant. Unknown names mean INFO.
        log_file: Size-rotated log file. Parent directories are created.
            Logs go to stderr when omitted.
        json_format: Emit JSON lines instead of plain text.

    Returns:
        The attached handler.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if log_file is None:
        handler: logging.Handler = logging.StreamHandler()
    else:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path, maxBytes=LOG_FILE_MAX_BYTES, backupCount=LOG_FILE_BACKUPS
        )

    handler.setLevel(level)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(DEFAULT_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler


def enable_console_logging(level: LogLevel | int = "INFO") -> logging.Handler:
    """Plain-text logging to stderr."""
    return setup_logging(level)


def configure_from_env(environ: Mapping[str, str] | None = None) -> logging.Handler | None:
    """Set up logging from LP_LOGGING / LP_LOG_FILE / LP_LOG_JSON.

    Returns None, leaving the library silent, when neither LP_LOGGING nor
    LP_LOG_FILE is set.
    """
    environ = os.environ if environ is None else environ
    level = environ.get("LP_LOGGING", "")
    log_file = environ.get("LP_LOG_FILE", "")
    if not level and not log_file:
        return None
    return setup_logging(
        level=level or "INFO",
        log_file=log_file or None,
        json_format=environ.get("LP_LOG_JSON", "") == "1",
    )
