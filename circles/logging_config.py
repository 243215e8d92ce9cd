"""
Logging setup shared by the circles service.

Every record is written to stdout as a single line:
Format: 2026-01-06T14:05:52Z [source] LEVEL message

Levels:
    INFO (default), DEBUG, or TRACE (5) for per-operation store diagnostics.
    The level comes from the LOG_LEVEL setting unless passed explicitly.

Usage:
    from circles.logging_config import configure_logging, get_logger

    configure_logging(source="api", level="DEBUG")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kw: object) -> None:
    """Log a message at TRACE level (5)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kw)  # type: ignore[arg-type]


logging.Logger.trace = _trace  # type: ignore[attr-defined]


class ISO8601Formatter(logging.Formatter):
    """Formatter producing UTC ISO8601 timestamps and a bracketed source tag."""

    def __init__(self, source: str = "circles"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


class HealthCheckFilter(logging.Filter):
    """Drop access-log lines for the health endpoint unless DEBUG is on.

    Container health checks hit /health every few seconds.
    """

    HEALTH_PATHS = {"/health"}

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno <= logging.DEBUG:
            return True

        message = record.getMessage()
        return all(f"{path} " not in message or "GET" not in message for path in self.HEALTH_PATHS)


def resolve_level(level: str | int | None) -> int:
    """Turn a level name ("INFO", "debug", "TRACE") or number into a logging level.

    Falls back to the LOG_LEVEL environment variable, then INFO.
    """
    if isinstance(level, int):
        return level

    name = (level or os.getenv("LOG_LEVEL", "")).upper()
    if name == "TRACE":
        return TRACE
    resolved = logging.getLevelName(name) if name else logging.INFO
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(source: str = "circles", level: str | int | None = None) -> logging.Logger:
    """Configure the root logger with the unified stdout handler.

    Args:
        source: Source identifier shown in brackets (e.g. "api")
        level: Level name or number; defaults to LOG_LEVEL or INFO

    Returns:
        Configured root logger
    """
    numeric_level = resolve_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())
    root_logger.addHandler(handler)

    # Uvicorn installs its own handlers; route them through ours instead
    for uvicorn_logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.setLevel(numeric_level)
        uvicorn_logger.propagate = False

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
