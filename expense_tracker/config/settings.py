"""
Configuration Management for the Expense Tracker model

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: The store itself takes plain constructor arguments.
Settings only decide how the factory wires it (audit on/off, what happens
when a listener fails). Tests can build a store without touching the
environment at all.
"""

import logging
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ListenerErrorPolicy(str, Enum):
    """
    What the store does when a listener raises during notification.

    PROPAGATE: stop the cycle and re-raise to the caller of the mutation.
    ISOLATE: keep notifying the remaining listeners, then raise one
             ListenerNotificationError describing every failure.
    """
    PROPAGATE = "propagate"
    ISOLATE = "isolate"


class StoreSettings(BaseSettings):
    """
    Transaction store settings.

    Loads configuration from EXPENSE_TRACKER_* environment variables
    and the .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    listener_error_policy: ListenerErrorPolicy = Field(
        default=ListenerErrorPolicy.PROPAGATE,
        description="How listener failures during notification are handled"
    )
    audit_enabled: bool = Field(
        default=True,
        description="Record every store action in the audit log"
    )
    audit_history_size: int = Field(
        default=1000,
        ge=0,
        description="How many recent audit events to keep in memory"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for audit log output"
    )

    @field_validator('listener_error_policy', mode='before')
    @classmethod
    def normalize_policy(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept the standard logging level names."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        """Get the numeric logging level."""
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache()
def get_settings() -> StoreSettings:
    """
    Get store settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return StoreSettings()
