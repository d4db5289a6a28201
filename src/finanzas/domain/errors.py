"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def fixed_expense_not_found(expense_id: int) -> str:
    """Return message for missing fixed expense."""
    return f"Fixed expense {expense_id} not found"


def credit_not_found(credit_id: int) -> str:
    """Return message for missing credit."""
    return f"Credit {credit_id} not found"


def invalid_month(month: int) -> str:
    """Return message for a month outside 0-11."""
    return f"Month must be between 0 and 11, got {month}"


def invalid_installments(installments: int, maximum: int | None = None) -> str:
    """Return message for an unusable installment count."""
    if maximum is None:
        return f"Installments must be a positive integer, got {installments}"
    return f"Installments must be between 1 and {maximum}, got {installments}"


def negative_amount(field: str, amount) -> str:
    """Return message for an amount below zero."""
    return f"{field} cannot be negative, got {amount}"
