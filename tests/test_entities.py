"""Tests for domain entities and mappers."""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime
from decimal import Decimal

from fintrack.database import models
from fintrack.database.mappers import account_to_domain, transaction_to_domain
from fintrack.domain.entities import TransactionType, User
from fintrack.domain.errors import ValidationError


@pytest.mark.parametrize(
    "value, expected",
    [
        ("credit", TransactionType.CREDIT),
        ("DEBIT", TransactionType.DEBIT),
        (" Credit ", TransactionType.CREDIT),
        (TransactionType.DEBIT, TransactionType.DEBIT),
    ],
)
def test_transaction_type_parse(value, expected):
    assert TransactionType.parse(value) is expected


def test_transaction_type_parse_rejects_unknown():
    with pytest.raises(ValidationError, match="expected one of: credit, debit"):
        TransactionType.parse("transfer")


def test_transaction_type_str():
    assert str(TransactionType.CREDIT) == "credit"


def test_entities_are_immutable():
    user = User(id="abcdefgh", name="John Doe", created_at=datetime.now())

    with pytest.raises(FrozenInstanceError):
        user.name = "Jane Doe"


def test_account_mapper_quantizes_balance():
    now = datetime.now()
    orm_account = models.Account(
        id="abcdefgh",
        name="Checking",
        bank="Test Bank",
        account_number=None,
        balance=Decimal("12.5"),
        holder_id="qwertyui",
        created_at=now,
        updated_at=now,
    )

    account = account_to_domain(orm_account)

    assert account.balance == Decimal("12.50")
    assert str(account.balance) == "12.50"
    assert account.created_at == now


def test_transaction_mapper_parses_type():
    now = datetime.now()
    orm_txn = models.Transaction(
        id="abcdefgh",
        account_id="qwertyui",
        amount=-300,
        type="debit",
        description="Coffee",
        category_id="zxcvbnmq",
        created_at=now,
        updated_at=now,
    )

    txn = transaction_to_domain(orm_txn)

    assert txn.transaction_type is TransactionType.DEBIT
    assert txn.amount == -300
