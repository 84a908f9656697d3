"""Account domain service."""

from dataclasses import replace
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import Account, AccountRequest
from fintrack.domain.errors import NotFoundError, ValidationError, account_not_found
from fintrack.domain.validation import optional_text, require_text

# Matches the accounts.balance column, Numeric(12, 2)
BALANCE_INTEGER_DIGITS = 10
CENT = Decimal("0.01")


def _check_balance(balance: Decimal) -> Decimal:
    balance = Decimal(balance)
    if not balance.is_finite():
        raise ValidationError(f"Balance must be a finite amount, got {balance}")
    if abs(balance) >= Decimal(10) ** BALANCE_INTEGER_DIGITS:
        raise ValidationError(
            f"Balance {balance} has more than {BALANCE_INTEGER_DIGITS} digits before the decimal point"
        )
    if balance != balance.quantize(CENT):
        raise ValidationError(f"Balance {balance} has more than 2 decimal places")
    return balance.quantize(CENT)


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        bank: str,
        balance: Decimal,
        holder_id: str,
        account_number: Optional[str] = None,
    ) -> Account:
        """Create a new account.

        Args:
            name: Account name
            bank: Bank name
            balance: Opening balance
            holder_id: ID of the holding user
            account_number: Optional account number

        Returns:
            The created account

        Raises:
            ValidationError: If a required field is blank or the balance does
                not fit two decimal places and ten integer digits
            ConstraintError: If the holder does not exist
        """
        request = AccountRequest(
            name=require_text(name, "Name"),
            bank=require_text(bank, "Bank"),
            balance=_check_balance(balance),
            holder_id=require_text(holder_id, "Holder"),
            account_number=optional_text(account_number),
        )
        return self.db.create_account(request)

    def get_account(self, account_id: str) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If no account has this ID
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(self, holder_id: Optional[str] = None) -> list[Account]:
        """List accounts, optionally only those held by ``holder_id``."""
        if holder_id is not None:
            return self.db.list_accounts_by_holder(holder_id)
        return self.db.list_accounts()

    def get_accounts_by_holder(self, holder_id: str) -> list[Account]:
        """List accounts held by a user."""
        return self.db.list_accounts_by_holder(holder_id)

    def search_accounts(self, name: str) -> list[Account]:
        """List accounts whose name contains ``name``."""
        return self.db.search_accounts(name or "")

    def update_account(
        self,
        account_id: str,
        name: str,
        bank: str,
        account_number: Optional[str],
        balance: Decimal,
        holder_id: str,
    ) -> Account:
        """Replace every mutable field of an account.

        Raises:
            NotFoundError: If no account has this ID
            ValidationError: If a required field is blank or the balance does
                not fit two decimal places and ten integer digits
            ConstraintError: If the new holder does not exist
        """
        account = self.get_account(account_id)
        updated = replace(
            account,
            name=require_text(name, "Name"),
            bank=require_text(bank, "Bank"),
            account_number=optional_text(account_number),
            balance=_check_balance(balance),
            holder_id=require_text(holder_id, "Holder"),
        )
        self.db.update_account(account_id, updated)
        return self.get_account(account_id)

    def delete_account(self, account_id: str) -> Account:
        """Delete an account together with its transactions.

        Returns:
            The account as it was before deletion

        Raises:
            NotFoundError: If no account has this ID
        """
        account = self.get_account(account_id)
        self.db.delete_account(account_id)
        return account
