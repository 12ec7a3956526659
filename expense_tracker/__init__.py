"""Observable in-memory model for an expense tracker."""

from .errors import ExpenseTrackerError, InvalidArgumentError
from .models import Observer, Transaction, TransactionStore

__version__ = "0.1.0"

__all__ = [
    "ExpenseTrackerError",
    "InvalidArgumentError",
    "Observer",
    "Transaction",
    "TransactionStore",
]
