"""Transaction domain service."""

from dataclasses import replace
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import Transaction, TransactionRequest, TransactionType
from fintrack.domain.errors import NotFoundError, ValidationError, transaction_not_found
from fintrack.domain.validation import require_text


def _check_amount(amount: int) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(f"Amount must be a whole number of minor units, got {amount!r}")
    return amount


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        account_id: str,
        amount: int,
        transaction_type: "TransactionType | str",
        description: str,
        category_id: str,
    ) -> Transaction:
        """Create a transaction.

        Args:
            account_id: Account the transaction is booked against
            amount: Signed amount in minor currency units (e.g. cents)
            transaction_type: credit or debit
            description: Free-text description
            category_id: Category the transaction is filed under

        Returns:
            The created transaction

        Raises:
            ValidationError: If a field is blank, the amount is not an integer or
                the type is unknown
            ConstraintError: If the account or category does not exist
        """
        request = TransactionRequest(
            account_id=require_text(account_id, "Account"),
            amount=_check_amount(amount),
            transaction_type=TransactionType.parse(transaction_type),
            description=require_text(description, "Description"),
            category_id=require_text(category_id, "Category"),
        )
        return self.db.create_transaction(request)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Get transaction by ID.

        Raises:
            NotFoundError: If no transaction has this ID
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def list_transactions(self, account_id: Optional[str] = None) -> list[Transaction]:
        """List transactions, optionally only those of one account."""
        if account_id is not None:
            return self.db.list_transactions_by_account(account_id)
        return self.db.list_transactions()

    def search_transactions(self, description: str) -> list[Transaction]:
        """List transactions whose description contains ``description``."""
        return self.db.search_transactions(description or "")

    def update_transaction(
        self,
        transaction_id: str,
        account_id: str,
        amount: int,
        transaction_type: "TransactionType | str",
        description: str,
        category_id: str,
    ) -> Transaction:
        """Replace every mutable field of a transaction.

        Raises:
            NotFoundError: If no transaction has this ID
            ValidationError: If a field is invalid
            ConstraintError: If the account or category does not exist
        """
        txn = self.get_transaction(transaction_id)
        updated = replace(
            txn,
            account_id=require_text(account_id, "Account"),
            amount=_check_amount(amount),
            transaction_type=TransactionType.parse(transaction_type),
            description=require_text(description, "Description"),
            category_id=require_text(category_id, "Category"),
        )
        self.db.update_transaction(transaction_id, updated)
        return self.get_transaction(transaction_id)

    def delete_transaction(self, transaction_id: str) -> Transaction:
        """Delete a transaction.

        Raises:
            NotFoundError: If no transaction has this ID
        """
        txn = self.get_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        return txn

    @staticmethod
    def format_label(transaction: Transaction) -> str:
        """Return the "description - amount" label used when offering a choice."""
        return f"{transaction.description} - {transaction.amount}"
