"""Display-shaped records for the table printer.

Each record is built from a domain entity and carries every stored field,
in the order the table shows them.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from fintrack.domain.entities import Account, Category, Transaction, User


@dataclass(frozen=True)
class UserResponse:
    id: str
    name: str
    created_at: datetime


@dataclass(frozen=True)
class AccountResponse:
    id: str
    name: str
    bank: str
    account_number: Optional[str]
    balance: Decimal
    holder_id: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CategoryResponse:
    id: str
    icon: str
    name: str
    created_at: datetime


@dataclass(frozen=True)
class TransactionResponse:
    id: str
    account_id: str
    amount: int
    transaction_type: str
    description: str
    category_id: str
    created_at: datetime
    updated_at: datetime


def user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, created_at=user.created_at)


def account_response(account: Account) -> AccountResponse:
    return AccountResponse(
        id=account.id,
        name=account.name,
        bank=account.bank,
        account_number=account.account_number,
        balance=account.balance,
        holder_id=account.holder_id,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


def category_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=category.id, icon=category.icon, name=category.name, created_at=category.created_at
    )


def transaction_response(transaction: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=transaction.id,
        account_id=transaction.account_id,
        amount=transaction.amount,
        transaction_type=transaction.transaction_type.value,
        description=transaction.description,
        category_id=transaction.category_id,
        created_at=transaction.created_at,
        updated_at=transaction.updated_at,
    )
