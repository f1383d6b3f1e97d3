"""Core utilities shared across design-export."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
