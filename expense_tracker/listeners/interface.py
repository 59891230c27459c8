"""
Abstract Listener Interface

DESIGN DECISION: Observers of the store implement a single method,
update(store). The store passes itself and the listener reads whatever
it needs through the public getters. There is no event payload or diff.

The store only checks for a callable `update` attribute, so subclassing
TransactionStoreListener is optional. CallbackListener wraps a plain
function for callers that do not want a class.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from expense_tracker.store.transaction_store import TransactionStore


class TransactionStoreListener(ABC):
    """
    Abstract interface for store observers.

    Views, controllers and anything else that mirrors the store's
    state implement this.
    """

    @abstractmethod
    def update(self, store: "TransactionStore") -> None:
        """
        Called synchronously after every committed store mutation.

        Args:
            store: The store that changed
        """
        pass


class CallbackListener(TransactionStoreListener):
    """Adapts a callable taking the store into a listener."""

    def __init__(self, callback: Callable[["TransactionStore"], None]):
        if not callable(callback):
            raise TypeError(f"Listener callback must be callable, got {callback!r}")
        self._callback = callback

    @property
    def callback(self) -> Callable[["TransactionStore"], None]:
        return self._callback

    def update(self, store: "TransactionStore") -> None:
        self._callback(store)

    def __repr__(self) -> str:
        name = getattr(self._callback, "__qualname__", repr(self._callback))
        return f"CallbackListener({name})"
