"""
Transaction Store

The observable model of the expense tracker. It owns:
- the list of transactions, in insertion order, duplicates allowed
- the indices of the transactions matched by the last filter
- the registry of listeners

DESIGN DECISION: Every mutation runs validate → mutate → notify, in that
order, before returning. A rejected call raises InvalidArgumentError and
leaves the store exactly as it was. Nothing is exposed by reference:
getters return copies, setters copy their input.

The store does not filter. A collaborator runs the filter and hands the
resulting positions to set_matched_filter_indices(). Any change to the
transaction list clears those positions, since they no longer refer to
the same transactions.
"""

from numbers import Integral
from typing import Any, Optional, Union

from expense_tracker.audit import StoreAuditLogger
from expense_tracker.config.settings import ListenerErrorPolicy
from expense_tracker.store.errors import (
    InvalidArgumentError,
    ListenerNotificationError,
)


NULL_TRANSACTION_MESSAGE = "The new transaction must be non-null."
NULL_INDICES_MESSAGE = "The matched filter indices list must be non-null."
INDEX_RANGE_MESSAGE = (
    "Each matched filter index must be between 0 (inclusive) "
    "and the number of transactions (exclusive)."
)


class TransactionStore:
    """
    In-memory transaction list with a matched-filter view and observers.

    Not thread-safe. Callers that share a store across threads must
    serialize access themselves.
    """

    def __init__(
        self,
        audit_logger: Optional[StoreAuditLogger] = None,
        listener_error_policy: Union[ListenerErrorPolicy, str] = ListenerErrorPolicy.PROPAGATE,
    ):
        """
        Initialize an empty store.

        Args:
            audit_logger: Where store actions are recorded.
                          If None, nothing is audited.
            listener_error_policy: What to do when a listener raises
                                   during notification.
        """
        self._transactions: list[Any] = []
        self._matched_filter_indices: list[int] = []
        self._listeners: list[Any] = []
        self._audit = audit_logger
        self._listener_error_policy = ListenerErrorPolicy(listener_error_policy)

    @property
    def listener_error_policy(self) -> ListenerErrorPolicy:
        return self._listener_error_policy

    # =========================================================================
    # TRANSACTIONS
    # =========================================================================

    def add_transaction(self, transaction: Any) -> None:
        """
        Append a transaction and notify listeners.

        Clears the matched filter indices.

        Raises:
            InvalidArgumentError: If transaction is None
        """
        if transaction is None:
            raise self._rejected("add_transaction", NULL_TRANSACTION_MESSAGE)

        self._transactions.append(transaction)
        self._matched_filter_indices.clear()

        if self._audit:
            self._audit.log_transaction_added(transaction, len(self._transactions))
        self._state_changed()

    def remove_transaction(self, transaction: Any) -> None:
        """
        Remove the first transaction equal to the given one.

        If no transaction matches, the list is left alone, but the matched
        filter indices are still cleared and listeners are still notified.
        """
        try:
            self._transactions.remove(transaction)
            found = True
        except ValueError:
            found = False
        self._matched_filter_indices.clear()

        if self._audit:
            self._audit.log_transaction_removed(
                transaction, found, len(self._transactions),
            )
        self._state_changed()

    def get_transactions(self) -> tuple:
        """Snapshot of the transactions, in insertion order."""
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    # =========================================================================
    # MATCHED FILTER
    # =========================================================================

    def set_matched_filter_indices(self, indices) -> None:
        """
        Replace the matched filter indices and notify listeners.

        Args:
            indices: Iterable of positions into the current transaction list

        Raises:
            InvalidArgumentError: If indices is None or not iterable, or
                any element is not an integer in [0, len(transactions))
        """
        operation = "set_matched_filter_indices"
        if indices is None:
            raise self._rejected(operation, NULL_INDICES_MESSAGE)
        try:
            candidates = list(indices)
        except TypeError:
            raise self._rejected(
                operation,
                f"The matched filter indices must be iterable, got {type(indices).__name__}.",
            ) from None

        new_indices = []
        for index in candidates:
            if isinstance(index, bool) or not isinstance(index, Integral):
                raise self._rejected(
                    operation,
                    f"Each matched filter index must be an integer, got {index!r}.",
                )
            if index < 0 or index >= len(self._transactions):
                raise self._rejected(operation, INDEX_RANGE_MESSAGE)
            new_indices.append(int(index))

        self._matched_filter_indices = new_indices

        if self._audit:
            self._audit.log_filter_indices_set(new_indices)
        self._state_changed()

    def get_matched_filter_indices(self) -> list[int]:
        """Copy of the current matched filter indices."""
        return list(self._matched_filter_indices)

    def get_matched_transactions(self) -> tuple:
        """Transactions referenced by the matched filter indices, in index order."""
        return tuple(self._transactions[i] for i in self._matched_filter_indices)

    # =========================================================================
    # LISTENERS
    # =========================================================================

    def register(self, listener: Any) -> bool:
        """
        Register a listener for state change notifications.

        Registering does not notify anyone.

        Returns:
            True if the listener was added, False if it was None,
            already registered, or has no callable update()
        """
        if listener is None or self.contains_listener(listener):
            return False
        if not callable(getattr(listener, "update", None)):
            if self._audit:
                self._audit.log_mutation_rejected(
                    "register", "Listener must provide a callable update(store).",
                )
            return False

        self._listeners.append(listener)

        if self._audit:
            self._audit.log_listener_registered(listener, len(self._listeners))
        return True

    def unregister(self, listener: Any) -> None:
        """Remove a listener. Does nothing if it is not registered."""
        for position, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[position]
                if self._audit:
                    self._audit.log_listener_unregistered(listener, len(self._listeners))
                return

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: Any) -> bool:
        """Membership by identity, not equality."""
        return any(registered is listener for registered in self._listeners)

    # =========================================================================
    # NOTIFICATION
    # =========================================================================

    def _state_changed(self) -> None:
        """
        Call update(self) on every listener, in registration order.

        Iterates over a snapshot of the registry: a listener registered
        during the cycle is first called on the next one, and a listener
        unregistered during the cycle is still called on this one.
        """
        failures = []
        for listener in list(self._listeners):
            try:
                listener.update(self)
            except Exception as e:
                if self._audit:
                    self._audit.log_listener_failed(listener, e)
                if self._listener_error_policy == ListenerErrorPolicy.PROPAGATE:
                    raise
                failures.append((listener, e))

        if failures:
            raise ListenerNotificationError(failures)

    def _rejected(self, operation: str, message: str) -> InvalidArgumentError:
        if self._audit:
            self._audit.log_mutation_rejected(operation, message)
        return InvalidArgumentError(message)
