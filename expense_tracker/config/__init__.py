"""Configuration package."""

from expense_tracker.config.settings import (
    ListenerErrorPolicy,
    StoreSettings,
    get_settings,
)

__all__ = [
    "ListenerErrorPolicy",
    "StoreSettings",
    "get_settings",
]
