"""
Store Factory

Wires settings and audit logging into a TransactionStore. Application
code should get its store from here; tests usually construct
TransactionStore directly.
"""

from typing import Optional

from expense_tracker.audit import StoreAuditLogger
from expense_tracker.config import StoreSettings, get_settings
from expense_tracker.store import TransactionStore


def create_store(settings: Optional[StoreSettings] = None) -> TransactionStore:
    """
    Factory function to create a configured store.

    Args:
        settings: Settings to use. Defaults to get_settings().

    Returns:
        An empty TransactionStore
    """
    if settings is None:
        settings = get_settings()

    audit_logger = None
    if settings.audit_enabled:
        audit_logger = StoreAuditLogger(
            level=settings.log_level_number,
            history_size=settings.audit_history_size,
        )

    return TransactionStore(
        audit_logger=audit_logger,
        listener_error_policy=settings.listener_error_policy,
    )
