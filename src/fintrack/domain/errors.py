"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only care that an operation failed.
    """


class ValidationError(DomainError):
    """Missing required value or malformed input."""


class NotFoundError(DomainError):
    """Requested entity does not exist or a search matched nothing."""


class StorageError(DomainError):
    """Underlying database failure. The original message is preserved."""


class ConstraintError(StorageError):
    """Foreign key or uniqueness violation reported by the database."""


def user_not_found(user_id: str) -> str:
    """Return message for missing user."""
    return f"User '{user_id}' not found"


def account_not_found(account_id: str) -> str:
    """Return message for missing account."""
    return f"Account '{account_id}' not found"


def category_not_found(category_id: str) -> str:
    """Return message for missing category."""
    return f"Category '{category_id}' not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction '{transaction_id}' not found"


def no_matches(kind: str, name: str) -> str:
    """Return message for a name search that matched nothing."""
    return f"No {kind} found with name '{name}'"


def nothing_to_select(kind: str) -> str:
    """Return message when an interactive selection has no candidates."""
    return f"No {kind} found. Create one first."


def required_field(field: str) -> str:
    """Return message for an empty required value."""
    return f"{field} is required"
