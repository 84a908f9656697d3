"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import (
    User,
    UserRequest,
    Account,
    AccountRequest,
    Category,
    CategoryRequest,
    Transaction,
    TransactionRequest,
)


class Database(ABC):
    """Abstract database interface for fintrack.

    ``get_*`` methods return None for unknown ids; ``update_*`` and
    ``delete_*`` are no-ops for unknown ids. Constraint violations raise
    ConstraintError and other driver failures raise StorageError.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, request: UserRequest) -> User:
        """Create a user and return it."""
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users."""
        pass

    @abstractmethod
    def search_users(self, name: str) -> list[User]:
        """List users whose name contains the given text."""
        pass

    @abstractmethod
    def update_user(self, user_id: str, user: User) -> None:
        """Overwrite the mutable fields of a user."""
        pass

    @abstractmethod
    def delete_user(self, user_id: str) -> None:
        """Delete a user and, by cascade, its accounts."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, request: AccountRequest) -> Account:
        """Create an account and return it."""
        pass

    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def search_accounts(self, name: str) -> list[Account]:
        """List accounts whose name contains the given text."""
        pass

    @abstractmethod
    def list_accounts_by_holder(self, holder_id: str) -> list[Account]:
        """List accounts held by a user."""
        pass

    @abstractmethod
    def update_account(self, account_id: str, account: Account) -> None:
        """Overwrite the mutable fields of an account."""
        pass

    @abstractmethod
    def delete_account(self, account_id: str) -> None:
        """Delete an account and, by cascade, its transactions."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, request: CategoryRequest) -> Category:
        """Create a category and return it."""
        pass

    @abstractmethod
    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories."""
        pass

    @abstractmethod
    def search_categories(self, name: str) -> list[Category]:
        """List categories whose name contains the given text."""
        pass

    @abstractmethod
    def update_category(self, category_id: str, category: Category) -> None:
        """Overwrite the mutable fields of a category."""
        pass

    @abstractmethod
    def delete_category(self, category_id: str) -> None:
        """Delete a category and, by cascade, its transactions."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(self, request: TransactionRequest) -> Transaction:
        """Create a transaction and return it."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        """List all transactions."""
        pass

    @abstractmethod
    def search_transactions(self, description: str) -> list[Transaction]:
        """List transactions whose description contains the given text."""
        pass

    @abstractmethod
    def list_transactions_by_account(self, account_id: str) -> list[Transaction]:
        """List transactions booked against an account."""
        pass

    @abstractmethod
    def update_transaction(self, transaction_id: str, transaction: Transaction) -> None:
        """Overwrite the mutable fields of a transaction."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""
        pass
