"""Generic SQLAlchemy database implementation."""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.database.base import Database
from fintrack.database.models import (
    User,
    Account,
    Category,
    Transaction,
    create_session_factory,
)
from fintrack.database.mappers import (
    user_to_domain,
    account_to_domain,
    category_to_domain,
    transaction_to_domain,
)
from fintrack.domain.entities import (
    User as DomainUser,
    UserRequest,
    Account as DomainAccount,
    AccountRequest,
    Category as DomainCategory,
    CategoryRequest,
    Transaction as DomainTransaction,
    TransactionRequest,
)
from fintrack.domain.errors import ConstraintError, DomainError, StorageError
from fintrack.utils.ids import random_id

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        # File path for SQLite URLs, None for in-memory or other backends
        self.database_path: Optional[str] = make_url(database_url).database or None
        try:
            self.session_factory = create_session_factory(database_url)
        except SQLAlchemyError as e:
            logger.warning(f"Could not open database {database_url}: {e}")
            raise StorageError(f"Failed to open database: {e}") from e
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    @contextmanager
    def _guard(self, action: str) -> Iterator[Session]:
        """Yield the session, translating driver failures into domain errors.

        The session is rolled back before the error propagates so the
        handle stays usable.
        """
        session = self._get_session()
        # Another process may have written to the file since the last call
        session.expire_all()
        try:
            yield session
        except DomainError:
            raise
        except IntegrityError as e:
            session.rollback()
            logger.warning(f"Constraint violation while trying to {action}: {e.orig}")
            raise ConstraintError(f"Failed to {action}: {e.orig}") from e
        except (SQLAlchemyError, ValueError) as e:
            session.rollback()
            logger.warning(f"Database error while trying to {action}: {e}")
            raise StorageError(f"Failed to {action}: {e}") from e

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    # User operations
    def create_user(self, request: UserRequest) -> DomainUser:
        """Create a user and return it."""
        with self._guard("create user") as session:
            user = User(id=random_id(), name=request.name, created_at=datetime.now())
            session.add(user)
            session.commit()
            logger.debug(f"Created user {user.id}")
            return user_to_domain(user)

    def get_user(self, user_id: str) -> Optional[DomainUser]:
        """Get user by ID."""
        with self._guard("get user") as session:
            user = session.query(User).filter(User.id == user_id).first()
            if user is None:
                return None
            return user_to_domain(user)

    def list_users(self) -> list[DomainUser]:
        """List all users."""
        with self._guard("list users") as session:
            users = session.query(User).order_by(User.created_at, User.id).all()
            return [user_to_domain(u) for u in users]

    def search_users(self, name: str) -> list[DomainUser]:
        """List users whose name contains the given text."""
        with self._guard("search users") as session:
            users = (
                session.query(User)
                .filter(User.name.contains(name, autoescape=True))
                .order_by(User.created_at, User.id)
                .all()
            )
            return [user_to_domain(u) for u in users]

    def update_user(self, user_id: str, user: DomainUser) -> None:
        """Overwrite the user's name."""
        with self._guard("update user") as session:
            orm_user = session.query(User).filter(User.id == user_id).first()
            if orm_user is None:
                logger.debug(f"Update skipped, no user {user_id}")
                return
            orm_user.name = user.name
            session.commit()

    def delete_user(self, user_id: str) -> None:
        """Delete a user and, by cascade, its accounts."""
        with self._guard("delete user") as session:
            orm_user = session.query(User).filter(User.id == user_id).first()
            if orm_user is None:
                logger.debug(f"Delete skipped, no user {user_id}")
                return
            session.delete(orm_user)
            session.commit()
            logger.debug(f"Deleted user {user_id}")

    # Account operations
    def create_account(self, request: AccountRequest) -> DomainAccount:
        """Create an account and return it."""
        with self._guard("create account") as session:
            now = datetime.now()
            account = Account(
                id=random_id(),
                name=request.name,
                bank=request.bank,
                account_number=request.account_number,
                balance=request.balance,
                holder_id=request.holder_id,
                created_at=now,
                updated_at=now,
            )
            session.add(account)
            session.commit()
            logger.debug(f"Created account {account.id} for holder {account.holder_id}")
            return account_to_domain(account)

    def get_account(self, account_id: str) -> Optional[DomainAccount]:
        """Get account by ID."""
        with self._guard("get account") as session:
            account = session.query(Account).filter(Account.id == account_id).first()
            if account is None:
                return None
            return account_to_domain(account)

    def list_accounts(self) -> list[DomainAccount]:
        """List all accounts."""
        with self._guard("list accounts") as session:
            accounts = session.query(Account).order_by(Account.created_at, Account.id).all()
            return [account_to_domain(acc) for acc in accounts]

    def search_accounts(self, name: str) -> list[DomainAccount]:
        """List accounts whose name contains the given text."""
        with self._guard("search accounts") as session:
            accounts = (
                session.query(Account)
                .filter(Account.name.contains(name, autoescape=True))
                .order_by(Account.created_at, Account.id)
                .all()
            )
            return [account_to_domain(acc) for acc in accounts]

    def list_accounts_by_holder(self, holder_id: str) -> list[DomainAccount]:
        """List accounts held by a user."""
        with self._guard("list accounts") as session:
            accounts = (
                session.query(Account)
                .filter(Account.holder_id == holder_id)
                .order_by(Account.created_at, Account.id)
                .all()
            )
            return [account_to_domain(acc) for acc in accounts]

    def update_account(self, account_id: str, account: DomainAccount) -> None:
        """Overwrite the mutable fields of an account."""
        with self._guard("update account") as session:
            orm_account = session.query(Account).filter(Account.id == account_id).first()
            if orm_account is None:
                logger.debug(f"Update skipped, no account {account_id}")
                return
            orm_account.name = account.name
            orm_account.bank = account.bank
            orm_account.account_number = account.account_number
            orm_account.balance = account.balance
            orm_account.holder_id = account.holder_id
            orm_account.updated_at = datetime.now()
            session.commit()

    def delete_account(self, account_id: str) -> None:
        """Delete an account and, by cascade, its transactions."""
        with self._guard("delete account") as session:
            orm_account = session.query(Account).filter(Account.id == account_id).first()
            if orm_account is None:
                logger.debug(f"Delete skipped, no account {account_id}")
                return
            session.delete(orm_account)
            session.commit()
            logger.debug(f"Deleted account {account_id}")

    # Category operations
    def create_category(self, request: CategoryRequest) -> DomainCategory:
        """Create a category and return it."""
        with self._guard("create category") as session:
            category = Category(
                id=random_id(), name=request.name, icon=request.icon, created_at=datetime.now()
            )
            session.add(category)
            session.commit()
            logger.debug(f"Created category {category.id}")
            return category_to_domain(category)

    def get_category(self, category_id: str) -> Optional[DomainCategory]:
        """Get category by ID."""
        with self._guard("get category") as session:
            cat = session.query(Category).filter(Category.id == category_id).first()
            if cat is None:
                return None
            return category_to_domain(cat)

    def list_categories(self) -> list[DomainCategory]:
        """List all categories."""
        with self._guard("list categories") as session:
            categories = session.query(Category).order_by(Category.created_at, Category.id).all()
            return [category_to_domain(cat) for cat in categories]

    def search_categories(self, name: str) -> list[DomainCategory]:
        """List categories whose name contains the given text."""
        with self._guard("search categories") as session:
            categories = (
                session.query(Category)
                .filter(Category.name.contains(name, autoescape=True))
                .order_by(Category.created_at, Category.id)
                .all()
            )
            return [category_to_domain(cat) for cat in categories]

    def update_category(self, category_id: str, category: DomainCategory) -> None:
        """Overwrite name and icon of a category."""
        with self._guard("update category") as session:
            cat = session.query(Category).filter(Category.id == category_id).first()
            if cat is None:
                logger.debug(f"Update skipped, no category {category_id}")
                return
            cat.name = category.name
            cat.icon = category.icon
            session.commit()

    def delete_category(self, category_id: str) -> None:
        """Delete a category and, by cascade, its transactions."""
        with self._guard("delete category") as session:
            cat = session.query(Category).filter(Category.id == category_id).first()
            if cat is None:
                logger.debug(f"Delete skipped, no category {category_id}")
                return
            session.delete(cat)
            session.commit()
            logger.debug(f"Deleted category {category_id}")

    # Transaction operations
    def create_transaction(self, request: TransactionRequest) -> DomainTransaction:
        """Create a transaction and return it."""
        with self._guard("create transaction") as session:
            now = datetime.now()
            transaction = Transaction(
                id=random_id(),
                account_id=request.account_id,
                amount=request.amount,
                type=request.transaction_type.value,
                description=request.description,
                category_id=request.category_id,
                created_at=now,
                updated_at=now,
            )
            session.add(transaction)
            session.commit()
            logger.debug(f"Created transaction {transaction.id} on account {transaction.account_id}")
            return transaction_to_domain(transaction)

    def get_transaction(self, transaction_id: str) -> Optional[DomainTransaction]:
        """Get transaction by ID."""
        with self._guard("get transaction") as session:
            txn = session.query(Transaction).filter(Transaction.id == transaction_id).first()
            if txn is None:
                return None
            return transaction_to_domain(txn)

    def list_transactions(self) -> list[DomainTransaction]:
        """List all transactions."""
        with self._guard("list transactions") as session:
            transactions = (
                session.query(Transaction).order_by(Transaction.created_at, Transaction.id).all()
            )
            return [transaction_to_domain(txn) for txn in transactions]

    def search_transactions(self, description: str) -> list[DomainTransaction]:
        """List transactions whose description contains the given text."""
        with self._guard("search transactions") as session:
            transactions = (
                session.query(Transaction)
                .filter(Transaction.description.contains(description, autoescape=True))
                .order_by(Transaction.created_at, Transaction.id)
                .all()
            )
            return [transaction_to_domain(txn) for txn in transactions]

    def list_transactions_by_account(self, account_id: str) -> list[DomainTransaction]:
        """List transactions booked against an account."""
        with self._guard("list transactions") as session:
            transactions = (
                session.query(Transaction)
                .filter(Transaction.account_id == account_id)
                .order_by(Transaction.created_at, Transaction.id)
                .all()
            )
            return [transaction_to_domain(txn) for txn in transactions]

    def update_transaction(self, transaction_id: str, transaction: DomainTransaction) -> None:
        """Overwrite the mutable fields of a transaction."""
        with self._guard("update transaction") as session:
            txn = session.query(Transaction).filter(Transaction.id == transaction_id).first()
            if txn is None:
                logger.debug(f"Update skipped, no transaction {transaction_id}")
                return
            txn.account_id = transaction.account_id
            txn.amount = transaction.amount
            txn.type = transaction.transaction_type.value
            txn.description = transaction.description
            txn.category_id = transaction.category_id
            txn.updated_at = datetime.now()
            session.commit()

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""
        with self._guard("delete transaction") as session:
            txn = session.query(Transaction).filter(Transaction.id == transaction_id).first()
            if txn is None:
                logger.debug(f"Delete skipped, no transaction {transaction_id}")
                return
            session.delete(txn)
            session.commit()
            logger.debug(f"Deleted transaction {transaction_id}")
