"""Entity builders for tests that do not need a database."""

from datetime import datetime, UTC
from decimal import Decimal

from finanzas.domain.aggregator import installment_amount
from finanzas.domain.entities import Credit, FixedExpense, Transaction, TransactionType


def make_transaction(id, type, amount, created_at, description="test"):
    """Build a Transaction entity without touching a database."""
    return Transaction(
        id=id,
        type=TransactionType(type),
        amount=Decimal(amount),
        description=description,
        created_at=created_at,
    )


def make_fixed_expense(id, amount, description="fixed"):
    """Build a FixedExpense entity without touching a database."""
    return FixedExpense(
        id=id,
        description=description,
        amount=Decimal(amount),
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


def make_credit(id, total_amount, installments, start_month, start_year, description="credit"):
    """Build a Credit entity with its derived installment amount."""
    total = Decimal(total_amount)
    return Credit(
        id=id,
        description=description,
        total_amount=total,
        installments=installments,
        start_month=start_month,
        start_year=start_year,
        installment_amount=installment_amount(total, installments),
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )
