"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from decimal import Decimal
from typing import Optional, Sequence

import pytest

from fintrack.cli.prompts import Prompter
from fintrack.database.factories import create_sqlite_database
from fintrack.domain.account import AccountService
from fintrack.domain.category import CategoryService
from fintrack.domain.transaction import TransactionService
from fintrack.domain.user import UserService


class CannedPrompter(Prompter):
    """Prompter that replays prepared answers in order.

    An answer of None accepts the prompt's default.
    """

    def __init__(self, *answers: Optional[str]):
        self.answers = list(answers)
        self.calls: list[tuple[str, str, Optional[str]]] = []

    def _next(self, message: str, default: Optional[str]) -> str:
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message!r}")
        answer = self.answers.pop(0)
        if answer is None:
            if default is None:
                raise AssertionError(f"Prompt {message!r} has no default to accept")
            return default
        return answer

    def text(self, message: str, help: Optional[str] = None, default: Optional[str] = None) -> str:
        self.calls.append(("text", message, default))
        return self._next(message, default)

    def select(self, message: str, options: Sequence[str], default: Optional[str] = None) -> str:
        self.calls.append(("select", message, default))
        self.last_options = list(options)
        return self._next(message, default)


@pytest.fixture(autouse=True)
def wide_terminal(monkeypatch):
    """Keep rich from wrapping table cells in captured output."""
    monkeypatch.setenv("COLUMNS", "200")


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_service(temp_db):
    """Create a UserService with a temporary database."""
    return UserService(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def sample_user(user_service):
    """Create a sample user for testing."""
    return user_service.create_user(name="John Doe")


@pytest.fixture
def sample_account(account_service, sample_user):
    """Create a sample account held by the sample user."""
    return account_service.create_account(
        name="Checking Account",
        bank="Test Bank",
        balance=Decimal("1000.50"),
        holder_id=sample_user.id,
        account_number="123456789",
    )


@pytest.fixture
def sample_category(category_service):
    """Create a sample category for testing."""
    return category_service.create_category(name="Groceries", icon="🛒")


@pytest.fixture
def sample_transaction(transaction_service, sample_account, sample_category):
    """Create a sample debit on the sample account."""
    return transaction_service.create_transaction(
        account_id=sample_account.id,
        amount=1250,
        transaction_type="debit",
        description="Weekly shop",
        category_id=sample_category.id,
    )


@pytest.fixture
def food_categories(category_service):
    """Create categories whose names overlap on "Food"."""
    return [
        category_service.create_category(name=name, icon=icon)
        for name, icon in [
            ("Food", "🍎"),
            ("Fast Food", "🍟"),
            ("Food Delivery", "🚚"),
            ("Pet Food", "🐕"),
        ]
    ]


@pytest.fixture
def canned_prompter():
    """Return the CannedPrompter class for building scripted prompters."""
    return CannedPrompter


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
