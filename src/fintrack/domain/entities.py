"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. Entities are what the storage layer hands back; request
records carry the caller-supplied fields of a create operation.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from fintrack.domain.errors import ValidationError


class TransactionType(str, Enum):
    """Direction of a transaction, stored as its lowercase tag."""

    CREDIT = "credit"
    DEBIT = "debit"

    @classmethod
    def parse(cls, value: "str | TransactionType") -> "TransactionType":
        """Parse a user-supplied tag, ignoring case and surrounding whitespace.

        Raises:
            ValidationError: If the tag is neither credit nor debit
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ValidationError(
                f"Invalid transaction type '{value}' (expected one of: {choices})"
            ) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class User:
    """Account holder domain entity."""

    id: str
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Account:
    """Bank account domain entity."""

    id: str
    name: str
    bank: str
    account_number: Optional[str]
    balance: Decimal
    holder_id: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Category:
    """Spending category domain entity."""

    id: str
    name: str
    icon: str
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity. Amount is in minor currency units."""

    id: str
    account_id: str
    amount: int
    transaction_type: TransactionType
    description: str
    category_id: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class UserRequest:
    name: str


@dataclass(frozen=True)
class AccountRequest:
    name: str
    bank: str
    balance: Decimal
    holder_id: str
    account_number: Optional[str] = None


@dataclass(frozen=True)
class CategoryRequest:
    name: str
    icon: str


@dataclass(frozen=True)
class TransactionRequest:
    account_id: str
    amount: int
    transaction_type: TransactionType
    description: str
    category_id: str
