"""
Store Audit Events

Every action on the transaction store is recorded as a StoreEvent:
committed mutations, registry changes, rejected calls and listener
failures.

DESIGN DECISION: Events are append-only. Reads are never audited.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class StoreEventType(str, Enum):
    """Types of store actions we audit."""
    # Committed mutations
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_REMOVED = "transaction_removed"
    FILTER_INDICES_SET = "filter_indices_set"

    # Listener registry
    LISTENER_REGISTERED = "listener_registered"
    LISTENER_UNREGISTERED = "listener_unregistered"

    # Failures
    MUTATION_REJECTED = "mutation_rejected"
    LISTENER_FAILED = "listener_failed"


class StoreEventSeverity(str, Enum):
    """Severity level for store events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def describe(value: Any) -> Any:
    """Render a transaction or listener for a log line."""
    to_log_dict = getattr(value, "to_log_dict", None)
    if callable(to_log_dict):
        return to_log_dict()
    return repr(value)


class StoreEvent(BaseModel):
    """A single audited store action."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )
    event_type: StoreEventType = Field(
        ...,
        description="Type of event"
    )
    severity: StoreEventSeverity = Field(
        default=StoreEventSeverity.INFO,
        description="Event severity"
    )
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class StoreEventBuilder:
    """
    Helper class to build store events with common patterns.

    Usage:
        event = StoreEventBuilder.transaction_added(t, transaction_count=3)
        event = StoreEventBuilder.mutation_rejected("add_transaction", str(exc))
    """

    @staticmethod
    def transaction_added(transaction: Any, transaction_count: int) -> StoreEvent:
        return StoreEvent(
            event_type=StoreEventType.TRANSACTION_ADDED,
            description="Transaction added",
            details={
                "transaction": describe(transaction),
                "transaction_count": transaction_count,
            },
        )

    @staticmethod
    def transaction_removed(
        transaction: Any,
        found: bool,
        transaction_count: int,
    ) -> StoreEvent:
        if found:
            description = "Transaction removed"
        else:
            description = "Transaction not found; filter cleared"
        return StoreEvent(
            event_type=StoreEventType.TRANSACTION_REMOVED,
            description=description,
            details={
                "transaction": describe(transaction),
                "found": found,
                "transaction_count": transaction_count,
            },
        )

    @staticmethod
    def filter_indices_set(indices: list[int]) -> StoreEvent:
        return StoreEvent(
            event_type=StoreEventType.FILTER_INDICES_SET,
            description=f"Matched filter set with {len(indices)} indices",
            details={"indices": list(indices)},
        )

    @staticmethod
    def listener_registered(listener: Any, listener_count: int) -> StoreEvent:
        return StoreEvent(
            event_type=StoreEventType.LISTENER_REGISTERED,
            severity=StoreEventSeverity.DEBUG,
            description="Listener registered",
            details={
                "listener": describe(listener),
                "listener_count": listener_count,
            },
        )

    @staticmethod
    def listener_unregistered(listener: Any, listener_count: int) -> StoreEvent:
        return StoreEvent(
            event_type=StoreEventType.LISTENER_UNREGISTERED,
            severity=StoreEventSeverity.DEBUG,
            description="Listener unregistered",
            details={
                "listener": describe(listener),
                "listener_count": listener_count,
            },
        )

    @staticmethod
    def mutation_rejected(operation: str, error_message: str) -> StoreEvent:
        return StoreEvent(
            event_type=StoreEventType.MUTATION_REJECTED,
            severity=StoreEventSeverity.WARNING,
            description=f"Rejected {operation}",
            details={"operation": operation},
            error_message=error_message,
        )

    @staticmethod
    def listener_failed(listener: Any, error: BaseException) -> StoreEvent:
        return StoreEvent(
            event_type=StoreEventType.LISTENER_FAILED,
            severity=StoreEventSeverity.ERROR,
            description="Listener raised during notification",
            details={
                "listener": describe(listener),
                "error_type": type(error).__name__,
            },
            error_message=str(error),
        )
