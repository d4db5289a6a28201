"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

_CURRENCY = re.compile(r"(?i)\b(uyu|usd|ars)\b|[$€£¥]")
_DECIMAL_COMMA = re.compile(r"^-?\d+,\d{1,2}$")


def _normalize_separators(amount_str: str) -> str:
    # "1.234,50" and "12,50" use a decimal comma; "1,234.50" and "1,234" do not
    if "," in amount_str and "." in amount_str:
        if amount_str.rfind(",") > amount_str.rfind("."):
            return amount_str.replace(".", "").replace(",", ".")
        return amount_str.replace(",", "")
    if _DECIMAL_COMMA.match(amount_str):
        return amount_str.replace(",", ".")
    return amount_str.replace(",", "")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "1234.50"
    - "$1,234.50"
    - "$ 1.234,50" (decimal comma)
    - "UYU 1234"
    - "-123.45"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is not finite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove currency symbols and codes, then inner whitespace
    cleaned = _CURRENCY.sub("", amount_str.strip())
    cleaned = re.sub(r"\s+", "", cleaned)
    cleaned = _normalize_separators(cleaned)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str.strip()}': not a finite number")
    return amount
