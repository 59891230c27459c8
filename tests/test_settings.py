"""
Tests for configuration and the store factory
"""

import logging

import pytest
from pydantic import ValidationError

from expense_tracker import create_store
from expense_tracker.config import ListenerErrorPolicy, StoreSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "EXPENSE_TRACKER_LISTENER_ERROR_POLICY",
        "EXPENSE_TRACKER_AUDIT_ENABLED",
        "EXPENSE_TRACKER_AUDIT_HISTORY_SIZE",
        "EXPENSE_TRACKER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestStoreSettings:
    """Tests for StoreSettings."""

    def test_defaults(self):
        """Test default values without any environment."""
        settings = StoreSettings(_env_file=None)
        assert settings.listener_error_policy == ListenerErrorPolicy.PROPAGATE
        assert settings.audit_enabled is True
        assert settings.audit_history_size == 1000
        assert settings.log_level == "INFO"
        assert settings.log_level_number == logging.INFO

    def test_loads_from_environment(self, monkeypatch):
        """Test EXPENSE_TRACKER_* variables are read."""
        monkeypatch.setenv("EXPENSE_TRACKER_LISTENER_ERROR_POLICY", "ISOLATE")
        monkeypatch.setenv("EXPENSE_TRACKER_AUDIT_ENABLED", "false")
        monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "debug")
        settings = StoreSettings(_env_file=None)
        assert settings.listener_error_policy == ListenerErrorPolicy.ISOLATE
        assert settings.audit_enabled is False
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        """Test that log levels are validated."""
        with pytest.raises(ValidationError):
            StoreSettings(_env_file=None, log_level="LOUD")

    def test_negative_history_size_rejected(self):
        """Test that the audit history size cannot be negative."""
        with pytest.raises(ValidationError):
            StoreSettings(_env_file=None, audit_history_size=-1)

    def test_unknown_policy_rejected(self):
        """Test that policies are validated."""
        with pytest.raises(ValidationError):
            StoreSettings(_env_file=None, listener_error_policy="retry")

    def test_get_settings_is_cached(self):
        """Test that get_settings returns the same instance until cleared."""
        assert get_settings() is get_settings()


class TestCreateStore:
    """Tests for the create_store factory."""

    def test_store_uses_configured_policy(self):
        """Test that the factory passes the policy through."""
        settings = StoreSettings(
            _env_file=None,
            listener_error_policy=ListenerErrorPolicy.ISOLATE,
        )
        store = create_store(settings)
        assert store.listener_error_policy == ListenerErrorPolicy.ISOLATE
        assert store.get_transactions() == ()

    def test_store_without_audit(self):
        """Test that audit can be switched off."""
        store = create_store(StoreSettings(_env_file=None, audit_enabled=False))
        store.add_transaction("coffee")
        assert store.get_transactions() == ("coffee",)

    def test_defaults_from_environment(self, monkeypatch):
        """Test that create_store() falls back to get_settings()."""
        monkeypatch.setenv("EXPENSE_TRACKER_LISTENER_ERROR_POLICY", "isolate")
        store = create_store()
        assert store.listener_error_policy == ListenerErrorPolicy.ISOLATE
