"""Input checks shared by the entry services."""

from decimal import Decimal, InvalidOperation
from typing import Any

from finanzas.domain.entities import TransactionType
from finanzas.domain.errors import ValidationError, invalid_installments, invalid_month

MAX_INSTALLMENTS = 48

# Amounts are stored as NUMERIC(12, 2)
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("9999999999.99")


def require_amount(amount: Any, field: str = "Amount") -> Decimal:
    """Return ``amount`` as a Decimal.

    Rejects zero, negative and non-finite values, and anything the ledger
    could not store exactly (more than two decimal places or too large).
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field} must be a number, got {amount!r}")
    if not value.is_finite() or value <= 0:
        raise ValidationError(f"{field} must be greater than zero, got {amount}")
    if value > MAX_AMOUNT:
        raise ValidationError(f"{field} cannot exceed {MAX_AMOUNT}, got {amount}")
    if value != value.quantize(CENT):
        raise ValidationError(f"{field} cannot have more than two decimal places, got {amount}")
    return value


def require_description(description: str | None, field: str = "Description") -> str:
    """Return the stripped description, rejecting blank text."""
    if description is None or not description.strip():
        raise ValidationError(f"{field} cannot be empty")
    return description.strip()


def require_type(value: Any) -> TransactionType:
    """Coerce a string such as "income" into a TransactionType."""
    try:
        return TransactionType(value.lower() if isinstance(value, str) else value)
    except ValueError:
        choices = ", ".join(t.value for t in TransactionType)
        raise ValidationError(f"Transaction type must be one of: {choices}, got {value!r}")


def require_installments(installments: Any) -> int:
    """Return the installment count, limited to 1..MAX_INSTALLMENTS."""
    if isinstance(installments, bool) or not isinstance(installments, int):
        raise ValidationError(invalid_installments(installments, MAX_INSTALLMENTS))
    if not 1 <= installments <= MAX_INSTALLMENTS:
        raise ValidationError(invalid_installments(installments, MAX_INSTALLMENTS))
    return installments


def require_month(month: Any) -> int:
    """Return a 0-indexed month, rejecting values outside 0..11."""
    if isinstance(month, bool) or not isinstance(month, int) or not 0 <= month <= 11:
        raise ValidationError(invalid_month(month))
    return month
