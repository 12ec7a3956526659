"""Observer protocol for transaction store notifications."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from expense_tracker.models.store import TransactionStore


@runtime_checkable
class Observer(Protocol):
    """Anything with an ``update(store)`` method can observe a store."""

    def update(self, store: "TransactionStore") -> None:
        ...
