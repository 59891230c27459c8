"""Transaction store exceptions."""

from typing import Any


class StoreError(Exception):
    """Base exception for transaction store operations."""
    pass


class InvalidArgumentError(StoreError, ValueError):
    """
    A mutation was called with an argument it cannot accept.

    Always raised before the store's state is touched.
    """
    pass


class ListenerNotificationError(StoreError):
    """
    One or more listeners raised during a notification cycle.

    Only raised under the isolate policy, after every listener in the
    cycle has been called. The mutation that triggered the cycle stays
    committed.
    """

    def __init__(self, failures: list[tuple[Any, BaseException]]):
        self.failures = list(failures)
        names = ", ".join(
            f"{listener!r}: {type(error).__name__}: {error}"
            for listener, error in self.failures
        )
        super().__init__(
            f"{len(self.failures)} listener(s) failed during notification ({names})"
        )
