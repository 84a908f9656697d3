"""SQLAlchemy models for fintrack database."""

from datetime import datetime
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _now() -> datetime:
    return datetime.now()


class User(Base):
    """Account holder model."""

    __tablename__ = "users"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    accounts = relationship(
        "Account", back_populates="holder", cascade="all, delete-orphan", passive_deletes=True
    )


class Account(Base):
    """Bank account model."""

    __tablename__ = "accounts"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    bank = Column(String, nullable=False)
    account_number = Column(String, nullable=True)
    balance = Column(Numeric(12, 2), nullable=False)
    holder_id = Column(
        String, ForeignKey("users.id", name="fk_accounts_users", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    holder = relationship("User", back_populates="accounts")
    transactions = relationship(
        "Transaction", back_populates="account", cascade="all, delete-orphan", passive_deletes=True
    )


class Category(Base):
    """Spending category model."""

    __tablename__ = "categories"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    icon = Column(String, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    transactions = relationship(
        "Transaction", back_populates="category", cascade="all, delete-orphan", passive_deletes=True
    )


class Transaction(Base):
    """Transaction model. Amount is stored in minor currency units."""

    __tablename__ = "transactions"

    id = Column(String, primary_key=True)
    account_id = Column(
        String,
        ForeignKey("accounts.id", name="fk_transactions_accounts", ondelete="CASCADE"),
        nullable=False,
    )
    amount = Column(Integer, nullable=False)
    # Canonical "credit"/"debit" tag; validated by TransactionType before it gets here
    type = Column(String, nullable=False)
    description = Column(String, nullable=False)
    category_id = Column(
        String,
        ForeignKey("categories.id", name="fk_transactions_categories", ondelete="CASCADE"),
        nullable=False,
    )
    created_at = Column(DateTime, default=_now, nullable=False)
    updated_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    account = relationship("Account", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY clauses unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine: Engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
