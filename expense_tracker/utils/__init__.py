"""Utilities module - Logging."""

from .logging import get_logger, LoggingObserver

__all__ = ["get_logger", "LoggingObserver"]
