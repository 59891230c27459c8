"""
Store Audit Logger

DESIGN DECISION: Every action that changes the store, and every call the
store refuses, is logged. This provides:
1. Traceability of what happened to the transaction list
2. Debugging capability when a listener misbehaves
3. A recent history tests and callers can inspect

The audit logger:
- Is synchronous, like the store that calls it
- Gracefully handles failures (never breaks a store mutation if logging fails)
- Keeps a bounded in-memory history of recent events
- Writes structured JSON lines through structlog
"""

import logging
from collections import deque
from typing import Any, Callable, Optional

import structlog

from expense_tracker.models.events import (
    StoreEvent,
    StoreEventBuilder,
    StoreEventSeverity,
)


LOGGER_NAME = "expense_tracker.audit"

DEFAULT_HISTORY_SIZE = 1000

_SEVERITY_LEVELS = {
    StoreEventSeverity.DEBUG: logging.DEBUG,
    StoreEventSeverity.INFO: logging.INFO,
    StoreEventSeverity.WARNING: logging.WARNING,
    StoreEventSeverity.ERROR: logging.ERROR,
}


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class StoreAuditLogger:
    """
    Audit log for a TransactionStore.

    Logs events both to:
    1. Structured local log (JSON via structlog)
    2. The in-memory `events` history (most recent `history_size` events)
    """

    def __init__(
        self,
        level: Optional[int] = None,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ):
        """
        Initialize audit logger.

        Args:
            level: Minimum stdlib level this logger emits.
                   If None, only the logging configuration decides.
                   Applies to this instance only.
            history_size: How many recent events to keep in memory.
                          0 keeps none.
        """
        if history_size < 0:
            raise ValueError(f"history_size must be >= 0, got {history_size}")
        self._level = level
        self._logger = structlog.get_logger(LOGGER_NAME)
        self._events: deque[StoreEvent] = deque(maxlen=history_size)

    @property
    def level(self) -> Optional[int]:
        return self._level

    @property
    def events(self) -> list[StoreEvent]:
        """Copy of the retained events, oldest first."""
        return list(self._events)

    def log(self, event: StoreEvent) -> None:
        """
        Log a store event.

        Never raises: a failure while emitting is reported as
        `audit_failed` and otherwise ignored.
        """
        self._events.append(event)

        if self._level is not None and _SEVERITY_LEVELS[event.severity] < self._level:
            return

        try:
            log_dict = event.to_log_dict()
            if event.severity == StoreEventSeverity.ERROR:
                self._logger.error("store_event", **log_dict)
            elif event.severity == StoreEventSeverity.WARNING:
                self._logger.warning("store_event", **log_dict)
            elif event.severity == StoreEventSeverity.DEBUG:
                self._logger.debug("store_event", **log_dict)
            else:
                self._logger.info("store_event", **log_dict)
        except Exception as e:
            self._audit_failed(event.event_type.value, e)

    def _record(self, build: Callable[..., StoreEvent], *args: Any) -> None:
        # Building an event renders arbitrary transactions and listeners.
        try:
            event = build(*args)
        except Exception as e:
            self._audit_failed(build.__name__, e)
            return
        self.log(event)

    def _audit_failed(self, event_type: str, error: Exception) -> None:
        try:
            self._logger.error(
                "audit_failed",
                event_type=event_type,
                error_type=type(error).__name__,
                error=str(error),
            )
        except Exception:
            logging.getLogger(LOGGER_NAME).exception("audit_failed")

    def log_transaction_added(self, transaction: Any, transaction_count: int) -> None:
        self._record(StoreEventBuilder.transaction_added, transaction, transaction_count)

    def log_transaction_removed(
        self,
        transaction: Any,
        found: bool,
        transaction_count: int,
    ) -> None:
        self._record(
            StoreEventBuilder.transaction_removed,
            transaction, found, transaction_count,
        )

    def log_filter_indices_set(self, indices: list[int]) -> None:
        self._record(StoreEventBuilder.filter_indices_set, indices)

    def log_listener_registered(self, listener: Any, listener_count: int) -> None:
        self._record(StoreEventBuilder.listener_registered, listener, listener_count)

    def log_listener_unregistered(self, listener: Any, listener_count: int) -> None:
        self._record(StoreEventBuilder.listener_unregistered, listener, listener_count)

    def log_mutation_rejected(self, operation: str, error_message: str) -> None:
        """Log a call the store refused before touching its state."""
        self._record(StoreEventBuilder.mutation_rejected, operation, error_message)

    def log_listener_failed(self, listener: Any, error: BaseException) -> None:
        """Log a listener that raised during notification."""
        self._record(StoreEventBuilder.listener_failed, listener, error)
