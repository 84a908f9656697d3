"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from fintrack.domain.errors import ValidationError


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if amount_str is None or not str(amount_str).strip():
        raise ValidationError("Empty amount string")

    # Remove whitespace
    amount_str = str(amount_str).strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Currency symbols may follow a leading minus sign
    amount_str = re.sub(r"[$€£¥]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValidationError(f"Could not parse amount '{amount_str}'") from None

    if not amount.is_finite():
        raise ValidationError(f"Could not parse amount '{amount_str}'")

    return -amount if is_negative else amount


def parse_minor_units(amount_str: str) -> int:
    """Parse a whole number of minor currency units (e.g. cents).

    Accepts the same notations as parse_amount, but the value must be
    integral: "1250", "-1,250" and "(300)" are fine, "12.50" is not.

    Raises:
        ValidationError: If the string is not a whole number
    """
    amount = parse_amount(amount_str)
    if amount != amount.to_integral_value():
        raise ValidationError(
            f"Amount '{amount_str}' must be a whole number of minor units (e.g. cents)"
        )
    return int(amount)
