"""Logging helpers and a logging observer for the transaction store."""

import logging
import sys
from typing import TYPE_CHECKING

from expense_tracker.config import settings

if TYPE_CHECKING:
    from expense_tracker.models.store import TransactionStore


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper()))
    return logger


class LoggingObserver:
    """Observer that writes a one-line summary of the store on every update."""

    def __init__(self, name: str = "expense_tracker.observer", level: str | None = None):
        self._logger = get_logger(name, level or settings.log_level)

    def update(self, store: "TransactionStore") -> None:
        """Log the current transaction and matched-index counts."""
        self._logger.info(
            f"Store updated: {len(store.get_transactions())} transaction(s), "
            f"{len(store.get_matched_filter_indices())} matched"
        )
