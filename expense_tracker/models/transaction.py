"""
Default Transaction Record

The store treats transactions as opaque values: it only needs equality
and a non-None check. This module provides the record the rest of the
application uses by default.

DESIGN DECISION: Transactions are frozen. Once a transaction is stored,
nobody can change its amount or category behind the store's back, and
equal records compare equal (which is what remove_transaction relies on).
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionCategory(str, Enum):
    """Supported expense categories."""
    FOOD = "food"
    TRAVEL = "travel"
    BILLS = "bills"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Transaction(BaseModel):
    """
    A single expense.

    Amount must be strictly positive. Category is matched
    case-insensitively against TransactionCategory.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    amount: Decimal = Field(
        ...,
        gt=0,
        decimal_places=2,
        description="Amount spent"
    )
    category: TransactionCategory = Field(
        ...,
        description="Expense category"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the expense was recorded (UTC)"
    )
    description: Optional[str] = Field(
        default=None,
        max_length=200,
        description="Free-text note"
    )

    @field_validator('category', mode='before')
    @classmethod
    def normalize_category(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "amount": str(self.amount),
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "description": self.description,
        }
