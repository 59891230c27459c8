"""
Data Models Package

Pydantic models for the default transaction record and the store's
audit events.
"""

from expense_tracker.models.transaction import (
    Transaction,
    TransactionCategory,
)
from expense_tracker.models.events import (
    StoreEvent,
    StoreEventBuilder,
    StoreEventSeverity,
    StoreEventType,
)

__all__ = [
    # Transaction models
    "Transaction",
    "TransactionCategory",
    # Audit models
    "StoreEvent",
    "StoreEventBuilder",
    "StoreEventSeverity",
    "StoreEventType",
]
