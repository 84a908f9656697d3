"""Field presence checks shared by the domain services."""

from typing import Optional

from fintrack.domain.errors import ValidationError, required_field


def require_text(value: Optional[str], field: str) -> str:
    """Return the stripped value, or raise if it is missing or blank."""
    if value is None or not str(value).strip():
        raise ValidationError(required_field(field))
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Return the stripped value, or None if it is missing or blank."""
    if value is None or not str(value).strip():
        return None
    return str(value).strip()
