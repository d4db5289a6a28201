"""Mapper functions to convert SQLAlchemy models into domain entities.

SQLite drops timezone information, so timestamps come back naive. They are
always written in UTC, and the mappers reattach that zone on the way out.
"""

from datetime import datetime, UTC
from decimal import Decimal

from finanzas.domain import entities as domain
from finanzas.database.models import (
    Transaction as ORMTransaction,
    FixedExpense as ORMFixedExpense,
    Credit as ORMCredit,
)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        type=domain.TransactionType(orm_transaction.type),
        amount=Decimal(orm_transaction.amount),
        description=orm_transaction.description or "",
        created_at=_as_utc(orm_transaction.created_at),
    )


def fixed_expense_to_domain(orm_expense: ORMFixedExpense) -> domain.FixedExpense:
    """Convert SQLAlchemy FixedExpense model to domain FixedExpense entity."""
    return domain.FixedExpense(
        id=orm_expense.id,
        description=orm_expense.description,
        amount=Decimal(orm_expense.amount),
        created_at=_as_utc(orm_expense.created_at),
    )


def credit_to_domain(orm_credit: ORMCredit) -> domain.Credit:
    """Convert SQLAlchemy Credit model to domain Credit entity."""
    return domain.Credit(
        id=orm_credit.id,
        description=orm_credit.description,
        total_amount=Decimal(orm_credit.total_amount),
        installments=orm_credit.installments,
        start_month=orm_credit.start_month,
        start_year=orm_credit.start_year,
        installment_amount=Decimal(orm_credit.installment_amount),
        created_at=_as_utc(orm_credit.created_at),
    )
