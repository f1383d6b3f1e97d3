"""Logging setup shared by the CLI and library modules."""

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "setup_logging"]

DEFAULT_LOGGER_NAME = "design-export"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Transport libraries log every request at INFO
_CHATTY_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str = logging.INFO, stream=None) -> None:
    """Configure root logging for a process.

    Args:
        level: Numeric level or a level name such as "debug". Unknown
            names fall back to INFO.
        stream: Output stream, stderr when omitted.
    """
    level = _resolve_level(level)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=stream or sys.stderr)

    transport_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, or the package logger."""
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
