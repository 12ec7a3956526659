"""Models module - transaction value object and the observable store."""

from .transaction import Transaction
from .observer import Observer
from .store import TransactionStore

__all__ = ["Transaction", "Observer", "TransactionStore"]
