"""
Tests for Expense Tracker models

Test strategy:
1. Unit tests for the default Transaction record
2. Unit tests for store audit events
3. No logging configuration or environment needed
"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal

from pydantic import ValidationError

from expense_tracker.models import (
    StoreEvent,
    StoreEventBuilder,
    StoreEventSeverity,
    StoreEventType,
    Transaction,
    TransactionCategory,
)


class TestTransaction:
    """Tests for the default Transaction record."""

    def test_transaction_creation(self):
        """Test Transaction model creation."""
        t = Transaction(
            amount=Decimal("45.50"),
            category=TransactionCategory.FOOD,
            description="Groceries",
        )
        assert t.amount == Decimal("45.50")
        assert t.category == TransactionCategory.FOOD
        assert t.timestamp.tzinfo is not None

    def test_category_is_case_insensitive(self):
        """Test that category strings are normalized."""
        t = Transaction(amount=Decimal("12.00"), category="  Travel ")
        assert t.category == TransactionCategory.TRAVEL

    def test_unknown_category_rejected(self):
        """Test that categories outside the enum are rejected."""
        with pytest.raises(ValidationError):
            Transaction(amount=Decimal("12.00"), category="gadgets")

    @pytest.mark.parametrize("amount", ["0", "-5.00"])
    def test_non_positive_amount_rejected(self, amount):
        """Test that amounts must be strictly positive."""
        with pytest.raises(ValidationError):
            Transaction(amount=Decimal(amount), category="food")

    def test_amount_precision_limited(self):
        """Test that more than two decimal places are rejected."""
        with pytest.raises(ValidationError):
            Transaction(amount=Decimal("1.005"), category="food")

    def test_description_strips_whitespace(self):
        """Test that whitespace is stripped from the description."""
        t = Transaction(amount=Decimal("3.00"), category="other", description="  taxi  ")
        assert t.description == "taxi"

    def test_transaction_is_frozen(self):
        """Test that stored transactions cannot be modified."""
        t = Transaction(amount=Decimal("3.00"), category="bills")
        with pytest.raises(ValidationError):
            t.amount = Decimal("4.00")

    def test_equal_fields_compare_equal(self):
        """Test value equality, which remove_transaction depends on."""
        when = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        a = Transaction(amount=Decimal("9.99"), category="entertainment", timestamp=when)
        b = Transaction(amount=Decimal("9.99"), category="entertainment", timestamp=when)
        assert a == b
        assert hash(a) == hash(b)
        assert a is not b

    def test_to_log_dict(self):
        """Test conversion to a log-friendly dictionary."""
        when = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        t = Transaction(amount=Decimal("9.99"), category="food", timestamp=when)
        log_dict = t.to_log_dict()
        assert log_dict == {
            "amount": "9.99",
            "category": "food",
            "timestamp": "2024-03-01T12:00:00+00:00",
            "description": None,
        }


class TestStoreEvents:
    """Tests for audit event models."""

    def test_store_event_creation(self):
        """Test StoreEvent model creation."""
        event = StoreEvent(
            event_type=StoreEventType.TRANSACTION_ADDED,
            description="Transaction added",
        )
        assert event.severity == StoreEventSeverity.INFO
        assert event.details == {}

    def test_store_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = StoreEventBuilder.filter_indices_set([2, 0])
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "filter_indices_set"
        assert log_dict["details"]["indices"] == [2, 0]

    def test_builder_transaction_added_describes_record(self):
        """Test that Transaction records are logged by their fields."""
        t = Transaction(amount=Decimal("20.00"), category="travel")
        event = StoreEventBuilder.transaction_added(t, transaction_count=1)
        assert event.details["transaction"]["amount"] == "20.00"
        assert event.details["transaction_count"] == 1

    def test_builder_transaction_added_describes_opaque_value(self):
        """Test that other values fall back to repr."""
        event = StoreEventBuilder.transaction_added("coffee", transaction_count=1)
        assert event.details["transaction"] == "'coffee'"

    def test_builder_transaction_removed_not_found(self):
        """Test the description of a removal that found nothing."""
        event = StoreEventBuilder.transaction_removed("x", found=False, transaction_count=0)
        assert event.details["found"] is False
        assert "not found" in event.description

    def test_builder_mutation_rejected(self):
        """Test StoreEventBuilder.mutation_rejected."""
        event = StoreEventBuilder.mutation_rejected("add_transaction", "bad input")
        assert event.event_type == StoreEventType.MUTATION_REJECTED
        assert event.severity == StoreEventSeverity.WARNING
        assert event.error_message == "bad input"

    def test_builder_listener_failed(self):
        """Test StoreEventBuilder.listener_failed."""
        event = StoreEventBuilder.listener_failed("view", KeyError("total"))
        assert event.severity == StoreEventSeverity.ERROR
        assert event.details["error_type"] == "KeyError"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
