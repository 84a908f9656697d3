"""Tests for table rendering."""

import pytest
from datetime import datetime
from decimal import Decimal
from io import StringIO

from rich.console import Console

from fintrack.cli.responses import (
    AccountResponse,
    CategoryResponse,
    account_response,
    transaction_response,
)
from fintrack.cli.table import format_cell, print_table


def _console():
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_format_cell():
    assert format_cell(None) == ""
    assert format_cell(Decimal("5")) == "5.00"
    assert format_cell(datetime(2024, 1, 15, 9, 30, 5, 123456)) == "2024-01-15 09:30:05"
    assert format_cell(1250) == "1250"


def test_print_table_has_title_headers_and_rows():
    console, buffer = _console()
    records = [
        AccountResponse(
            id="abcdefgh",
            name="Checking Account",
            bank="Test Bank",
            account_number=None,
            balance=Decimal("1000.5"),
            holder_id="qwertyui",
            created_at=datetime(2024, 1, 15, 9, 30, 5),
            updated_at=datetime(2024, 2, 1, 18, 0, 0),
        )
    ]

    print_table(records, "Accounts", console=console)

    output = buffer.getvalue()
    assert "Accounts" in output
    for header in [
        "id",
        "name",
        "bank",
        "account_number",
        "balance",
        "holder_id",
        "created_at",
        "updated_at",
    ]:
        assert header in output
    assert "Checking Account" in output
    assert "1000.50" in output
    assert "2024-01-15 09:30:05" in output
    assert "2024-02-01 18:00:00" in output
    assert "╭" in output


def test_print_table_does_not_interpret_markup():
    console, buffer = _console()
    records = [CategoryResponse(id="abcdefgh", icon="🛒", name="[bold]Food[/bold]", created_at=None)]

    print_table(records, "Categories", console=console)

    assert "[bold]Food[/bold]" in buffer.getvalue()


def test_print_table_empty(capsys):
    print_table([], "Accounts")

    assert capsys.readouterr().out == "No accounts found.\n"


def test_print_table_requires_dataclasses():
    with pytest.raises(TypeError):
        print_table([{"id": "abcdefgh"}], "Users")


def test_responses_carry_timestamps(sample_account, sample_transaction):
    account = account_response(sample_account)
    txn = transaction_response(sample_transaction)

    assert account.created_at == sample_account.created_at
    assert account.updated_at == sample_account.updated_at
    assert txn.created_at == sample_transaction.created_at
    assert txn.updated_at == sample_transaction.updated_at
    assert txn.transaction_type == "debit"
