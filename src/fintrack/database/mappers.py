"""Mapper functions to convert SQLAlchemy models into domain entities.

This layer isolates the conversion logic, so the domain entities stay the
same when the table layout changes.
"""

from decimal import Decimal

from fintrack.domain import entities as domain
from fintrack.database.models import (
    User as ORMUser,
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        name=orm_user.name,
        created_at=orm_user.created_at,
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        bank=orm_account.bank,
        account_number=orm_account.account_number,
        balance=Decimal(orm_account.balance).quantize(Decimal("0.01")),
        holder_id=orm_account.holder_id,
        created_at=orm_account.created_at,
        updated_at=orm_account.updated_at,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        icon=orm_category.icon,
        created_at=orm_category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        amount=orm_transaction.amount,
        transaction_type=domain.TransactionType.parse(orm_transaction.type),
        description=orm_transaction.description,
        category_id=orm_transaction.category_id,
        created_at=orm_transaction.created_at,
        updated_at=orm_transaction.updated_at,
    )
