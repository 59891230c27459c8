"""Store listener package."""

from expense_tracker.listeners.interface import (
    CallbackListener,
    TransactionStoreListener,
)

__all__ = ["CallbackListener", "TransactionStoreListener"]
