"""
Expense Tracker - Model Package

The observable core of an expense tracker: a store of transactions and
matched filter results that notifies its listeners on every change.

DESIGN PRINCIPLES:
1. Validate before mutating, never partially apply
2. Never hand out internal state by reference
3. Every committed change notifies every listener exactly once
4. Every change is auditable
"""

from expense_tracker.factory import create_store
from expense_tracker.listeners import CallbackListener, TransactionStoreListener
from expense_tracker.models import Transaction, TransactionCategory
from expense_tracker.store import (
    InvalidArgumentError,
    ListenerNotificationError,
    StoreError,
    TransactionStore,
)

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"

__all__ = [
    "CallbackListener",
    "InvalidArgumentError",
    "ListenerNotificationError",
    "StoreError",
    "Transaction",
    "TransactionCategory",
    "TransactionStore",
    "TransactionStoreListener",
    "create_store",
]
