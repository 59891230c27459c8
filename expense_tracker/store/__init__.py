"""
Transaction Store Package

The observable model: transactions, matched filter indices and listeners.
"""

from expense_tracker.store.errors import (
    InvalidArgumentError,
    ListenerNotificationError,
    StoreError,
)
from expense_tracker.store.transaction_store import TransactionStore

__all__ = [
    "TransactionStore",
    # Exceptions
    "InvalidArgumentError",
    "ListenerNotificationError",
    "StoreError",
]
