"""Audit logging package."""

from expense_tracker.audit.logger import StoreAuditLogger

__all__ = ["StoreAuditLogger"]
