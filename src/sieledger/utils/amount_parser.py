"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from sieledger.domain.errors import ValidationError, invalid_amount


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "-123.45"
    - "123,45" (decimal comma)
    - "1 234,50" and "1,234.50" (thousands separators)
    - "123 kr", "SEK 123"
    - "(123.45)" (negative in parentheses)

    The number of decimals given is preserved, so "400" stays "400" and
    "400.00" stays "400.00".

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency markers
    amount_str = re.sub(r"(?i)sek|kr\.?|[$€£]", "", amount_str)

    # Remove whitespace, including non-breaking spaces used as thousands separators
    amount_str = re.sub(r"\s", "", amount_str)

    if "," in amount_str:
        if "." in amount_str:
            amount_str = amount_str.replace(",", "")
        else:
            amount_str = amount_str.replace(",", ".")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValidationError(invalid_amount(amount_str, e)) from e

    if not amount.is_finite():
        raise ValidationError(invalid_amount(amount_str, "not a finite number"))

    if is_negative:
        amount = -amount
    return amount
