"""Credit installment and monthly statistics calculations.

Everything here is a pure function over caller-supplied collections: no
database access, no clock, no mutation of inputs. Months are 0-indexed
(0 = January) and are compared as integer ``year * 12 + month`` indexes
rather than through date subtraction.
"""

import logging
from datetime import datetime, tzinfo, UTC
from decimal import Decimal, ROUND_CEILING
from typing import Iterable, Optional

from finanzas.domain.entities import (
    ActiveCredit,
    Credit,
    CreditStatus,
    CreditsSummary,
    FixedExpense,
    MonthlyStats,
    Transaction,
    TransactionType,
)
from finanzas.domain.errors import (
    ValidationError,
    invalid_installments,
    invalid_month,
    negative_amount,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def month_index(year: int, month: int) -> int:
    """Return an absolute month number so months can be compared as integers."""
    if not 0 <= month <= 11:
        raise ValidationError(invalid_month(month))
    return year * 12 + month


def months_between(start_year: int, start_month: int, year: int, month: int) -> int:
    """Return how many months (year, month) lies after (start_year, start_month).

    Negative when the target month precedes the start month.
    """
    return month_index(year, month) - month_index(start_year, start_month)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Return the (year, month) pair ``offset`` months away."""
    return divmod(month_index(year, month) + offset, 12)


def _check_amount(field: str, amount: Decimal) -> Decimal:
    amount = Decimal(amount)
    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number, got {amount}")
    if amount < 0:
        raise ValidationError(negative_amount(field, amount))
    return amount


def _check_credit(credit: Credit) -> None:
    if credit.installments <= 0:
        raise ValidationError(
            f"Credit {credit.id}: {invalid_installments(credit.installments)}"
        )
    _check_amount("Installment amount", credit.installment_amount)


def installment_amount(total_amount: Decimal, installments: int) -> Decimal:
    """Return the per-month installment, rounded up to a whole currency unit.

    The sum of all installments can exceed ``total_amount`` by up to
    ``installments - 1`` units; that surplus is kept.
    """
    if installments <= 0:
        raise ValidationError(invalid_installments(installments))
    total = _check_amount("Total amount", total_amount)
    return (total / Decimal(installments)).to_integral_value(rounding=ROUND_CEILING)


def credit_end(credit: Credit) -> tuple[int, int]:
    """Return the (year, month) of the credit's last installment."""
    _check_credit(credit)
    return shift_month(credit.start_year, credit.start_month, credit.installments - 1)


def credit_status(credit: Credit, year: int, month: int) -> CreditStatus:
    """Classify a credit relative to the given month."""
    _check_credit(credit)
    diff = months_between(credit.start_year, credit.start_month, year, month)
    if diff < 0:
        return CreditStatus.NOT_STARTED
    if diff < credit.installments:
        return CreditStatus.ACTIVE
    return CreditStatus.PAID


def active_credits_for_month(
    credits: Iterable[Credit], year: int, month: int
) -> list[ActiveCredit]:
    """Return the credits whose payment window covers the given month.

    Each credit is annotated with its 1-indexed installment number for that
    month. Result order follows input order but is not part of the contract.
    """
    target = month_index(year, month)
    active = []
    for credit in credits:
        _check_credit(credit)
        diff = target - month_index(credit.start_year, credit.start_month)
        if 0 <= diff < credit.installments:
            active.append(ActiveCredit(credit=credit, current_installment=diff + 1))
    return active


def credits_summary(
    credits: Iterable[Credit], reference_year: int, reference_month: int
) -> CreditsSummary:
    """Summarize outstanding credit obligations as of a reference month.

    Active credits contribute their installment to the monthly total and the
    installments still owed (current one included) to the remaining total.
    Credits that have not started contribute their full amount to the
    remaining total. Fully paid credits contribute nothing.
    """
    target = month_index(reference_year, reference_month)
    total_remaining = ZERO
    total_monthly = ZERO
    active_count = 0
    total_credits = 0

    for credit in credits:
        _check_credit(credit)
        total_credits += 1
        diff = target - month_index(credit.start_year, credit.start_month)
        if 0 <= diff < credit.installments:
            active_count += 1
            total_monthly += credit.installment_amount
            total_remaining += credit.installment_amount * (credit.installments - diff)
        elif diff < 0:
            total_remaining += _check_amount("Total amount", credit.total_amount)

    return CreditsSummary(
        total_remaining=total_remaining,
        active_count=active_count,
        total_monthly=total_monthly,
        total_credits=total_credits,
    )


def to_timezone(timestamp: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Convert a timestamp into the canonical timezone.

    Naive timestamps are read as UTC, which is how the store persists them.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(tz or UTC)


def in_month(timestamp: datetime, year: int, month: int, tz: Optional[tzinfo] = None) -> bool:
    """Return True if the timestamp falls in the calendar month in ``tz``."""
    local = to_timezone(timestamp, tz)
    return local.year == year and local.month - 1 == month


def transactions_for_month(
    transactions: Iterable[Transaction],
    year: int,
    month: int,
    tz: Optional[tzinfo] = None,
) -> list[Transaction]:
    """Return the transactions created in the given calendar month."""
    month_index(year, month)
    return [txn for txn in transactions if in_month(txn.created_at, year, month, tz)]


def _sum_amounts(items: Iterable, field: str) -> Decimal:
    return sum((_check_amount(field, item.amount) for item in items), ZERO)


def monthly_stats(
    transactions: Iterable[Transaction],
    fixed_expenses: Iterable[FixedExpense],
    credits: Iterable[Credit],
    year: int,
    month: int,
    tz: Optional[tzinfo] = None,
) -> MonthlyStats:
    """Aggregate income, expenses and balance for one calendar month.

    Fixed expenses apply to every month, so the whole collection counts
    regardless of when each one was created. Credits contribute the
    installment of every credit active in the month.
    """
    monthly = transactions_for_month(transactions, year, month, tz)

    income = _sum_amounts(
        (txn for txn in monthly if txn.type == TransactionType.INCOME), "Income"
    )
    variable_expenses = _sum_amounts(
        (txn for txn in monthly if txn.type == TransactionType.EXPENSE), "Expense"
    )
    fixed_total = _sum_amounts(fixed_expenses, "Fixed expense")
    credits_total = sum(
        (active.installment_amount for active in active_credits_for_month(credits, year, month)),
        ZERO,
    )

    total_expenses = variable_expenses + fixed_total + credits_total
    stats = MonthlyStats(
        income=income,
        variable_expenses=variable_expenses,
        fixed_expenses=fixed_total,
        credits_expenses=credits_total,
        total_expenses=total_expenses,
        balance=income - total_expenses,
    )
    logger.debug("Monthly stats for %04d-%02d: %s", year, month + 1, stats)
    return stats
