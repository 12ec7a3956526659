"""Exceptions raised by the expense tracker model."""


class ExpenseTrackerError(Exception):
    """Base class for expense tracker errors."""
    pass


class InvalidArgumentError(ExpenseTrackerError, ValueError):
    """Raised when an operation receives an argument it cannot accept."""
    pass
