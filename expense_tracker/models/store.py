"""Observable in-memory store of transactions and matched filter indices."""

import operator
from typing import Any, Iterable

from expense_tracker.config import settings
from expense_tracker.errors import InvalidArgumentError
from expense_tracker.models.observer import Observer
from expense_tracker.utils.logging import get_logger


logger = get_logger("expense_tracker.store", settings.log_level)


class TransactionStore:
    """Holds the transaction list and notifies observers on every change.

    The store also keeps the indices of the transactions that satisfy a filter
    computed elsewhere. Any structural change to the transaction list clears
    them.

    Not thread-safe: callers sharing a store across threads must guard it with
    a single lock.
    """

    def __init__(self):
        self._transactions: list[Any] = []
        self._matched_filter_indices: list[int] = []
        self._observers: list[Observer] = []

    def add_transaction(self, transaction: Any) -> None:
        """Append a transaction and notify observers.

        Raises:
            InvalidArgumentError: If transaction is None
        """
        if transaction is None:
            raise InvalidArgumentError("The new transaction must be non-null.")
        self._transactions.append(transaction)
        # The previous filter is no longer valid
        self._matched_filter_indices.clear()
        logger.debug(f"Added transaction ({len(self._transactions)} total)")
        self._state_changed()

    def remove_transaction(self, transaction: Any) -> None:
        """Remove the first transaction equal to the given one.

        Removing a transaction that is not present leaves the list untouched,
        but still clears the matched indices and notifies observers.
        """
        if transaction in self._transactions:
            self._transactions.remove(transaction)
            logger.debug(f"Removed transaction ({len(self._transactions)} left)")
        else:
            logger.debug(f"Transaction not found ({len(self._transactions)} total)")
        self._matched_filter_indices.clear()
        self._state_changed()

    def get_transactions(self) -> tuple[Any, ...]:
        """Return an immutable snapshot of the transactions, in insertion order."""
        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Iterable[int]) -> None:
        """Replace the matched filter indices and notify observers.

        Every index is checked before anything is changed, so a rejected call
        leaves the previous indices in place.

        Args:
            indices: Positions into the current transaction list

        Raises:
            InvalidArgumentError: If indices is None, or any element is not an
                integer in the range [0, number of transactions)
        """
        if indices is None:
            raise InvalidArgumentError("The matched filter indices list must be non-null.")
        size = len(self._transactions)
        new_indices = []
        for value in indices:
            if isinstance(value, bool):
                raise InvalidArgumentError(
                    f"Each matched filter index must be an integer, got {value!r}."
                )
            try:
                index = operator.index(value)
            except TypeError as e:
                raise InvalidArgumentError(
                    f"Each matched filter index must be an integer, got {value!r}."
                ) from e
            if index < 0 or index > size - 1:
                raise InvalidArgumentError(
                    "Each matched filter index must be between 0 (inclusive) "
                    "and the number of transactions (exclusive)."
                )
            new_indices.append(index)
        self._matched_filter_indices = new_indices
        logger.debug(f"Matched filter indices set ({len(new_indices)} matched)")
        self._state_changed()

    def get_matched_filter_indices(self) -> list[int]:
        """Return a copy of the matched filter indices."""
        return list(self._matched_filter_indices)

    def register(self, observer: Observer | None) -> bool:
        """Register an observer for state change events.

        Returns:
            True if the observer is non-null and was not already registered,
            False otherwise
        """
        if observer is not None and observer not in self._observers:
            self._observers.append(observer)
            return True
        return False

    def number_of_listeners(self) -> int:
        return len(self._observers)

    def contains_listener(self, observer: Observer | None) -> bool:
        return observer in self._observers

    def _state_changed(self) -> None:
        """Call update() on every observer registered at this moment."""
        for observer in list(self._observers):
            observer.update(self)
