"""Resolve the entity a get/update/delete command operates on.

Resolution order is the same for every entity: an explicit ``--id`` wins,
then a ``--name`` substring search, then an interactive prompt. A search
with several hits is settled by asking the user to pick one.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

from fintrack.cli.prompts import Prompter
from fintrack.database.base import Database
from fintrack.domain.account import AccountService
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import Account, Category, Transaction, User
from fintrack.domain.errors import NotFoundError, ValidationError, no_matches, nothing_to_select
from fintrack.domain.resolution import ResolutionKind, build_choices, resolve_candidates
from fintrack.domain.transaction import TransactionService
from fintrack.domain.user import UserService

T = TypeVar("T")


def _account_label(account: Account) -> str:
    return account.name


def _user_label(user: User) -> str:
    return user.name


class EntityLookup:
    """Find users, accounts, categories and transactions from CLI input."""

    def __init__(self, db: Database, prompter: Prompter):
        self.users = UserService(db)
        self.accounts = AccountService(db)
        self.categories = CategoryService(db)
        self.transactions = TransactionService(db)
        self.prompter = prompter

    def _pick(
        self,
        message: str,
        candidates: Sequence[T],
        label: Callable[[T], str],
        default_id: Optional[str] = None,
    ) -> T:
        choices = build_choices(candidates, label)
        default = next((text for text, item in choices.items() if item.id == default_id), None)
        picked = self.prompter.select(message, list(choices), default=default)
        if picked not in choices:
            raise ValidationError(f"'{picked}' is not one of the offered choices")
        return choices[picked]

    def _resolve(
        self,
        kind: str,
        query: str,
        candidates: Sequence[T],
        label: Callable[[T], str],
        message: str,
    ) -> T:
        resolution = resolve_candidates(candidates)
        if resolution.kind is ResolutionKind.MATCH:
            return resolution.match
        if resolution.kind is ResolutionKind.NONE:
            raise NotFoundError(no_matches(kind, query))
        return self._pick(message, resolution.candidates, label)

    def _select_from(
        self,
        kind: str,
        candidates: Sequence[T],
        label: Callable[[T], str],
        message: str,
        default_id: Optional[str] = None,
    ) -> T:
        if not candidates:
            raise NotFoundError(nothing_to_select(kind))
        return self._pick(message, candidates, label, default_id=default_id)

    # Users
    def user(self, user_id: Optional[str] = None, name: Optional[str] = None) -> User:
        if user_id is not None:
            return self.users.get_user(user_id)
        if name is None:
            name = self.prompter.text("Name", help="Enter the name of the user")
        return self._resolve(
            "users", name, self.users.search_users(name), _user_label, "Select a user"
        )

    def select_user(self, default_id: Optional[str] = None) -> User:
        return self._select_from(
            "users", self.users.list_users(), _user_label, "Select a user", default_id
        )

    # Accounts
    def account(self, account_id: Optional[str] = None, name: Optional[str] = None) -> Account:
        if account_id is not None:
            return self.accounts.get_account(account_id)
        if name is not None:
            return self._resolve(
                "accounts",
                name,
                self.accounts.search_accounts(name),
                _account_label,
                "Select an account",
            )
        return self.select_account()

    def select_account(self, default_id: Optional[str] = None) -> Account:
        return self._select_from(
            "accounts",
            self.accounts.list_accounts(),
            _account_label,
            "Select an account",
            default_id,
        )

    # Categories
    def category(self, category_id: Optional[str] = None, name: Optional[str] = None) -> Category:
        if category_id is not None:
            return self.categories.get_category(category_id)
        if name is None:
            name = self.prompter.text("Name", help="Enter the name of the category")
        return self._resolve(
            "categories",
            name,
            self.categories.search_categories(name),
            CategoryService.format_label,
            "Select a category",
        )

    def select_category(self, default_id: Optional[str] = None) -> Category:
        return self._select_from(
            "categories",
            self.categories.list_categories(),
            CategoryService.format_label,
            "Select a category",
            default_id,
        )

    # Transactions
    def transaction(
        self, transaction_id: Optional[str] = None, name: Optional[str] = None
    ) -> Transaction:
        if transaction_id is not None:
            return self.transactions.get_transaction(transaction_id)
        if name is not None:
            return self._resolve(
                "transactions",
                name,
                self.transactions.search_transactions(name),
                TransactionService.format_label,
                "Select a transaction",
            )
        return self.select_transaction()

    def select_transaction(self) -> Transaction:
        return self._select_from(
            "transactions",
            self.transactions.list_transactions(),
            TransactionService.format_label,
            "Select a transaction",
        )
