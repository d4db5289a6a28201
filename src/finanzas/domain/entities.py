"""Domain model entities for finanzas.

These are pure data classes representing the ledger, independent of the
database schema. Stores convert their rows into these at the boundary so the
aggregation code only ever sees one shape.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class CreditStatus(str, Enum):
    """Where a reference month falls relative to a credit's payment window."""

    NOT_STARTED = "not_started"
    ACTIVE = "active"
    PAID = "paid"


@dataclass(frozen=True)
class Transaction:
    """One-off income or expense."""

    id: int
    type: TransactionType
    amount: Decimal
    description: str
    created_at: datetime


@dataclass(frozen=True)
class FixedExpense:
    """Expense that recurs with the same amount every month."""

    id: int
    description: str
    amount: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Credit:
    """Purchase repaid in monthly installments.

    ``start_month`` is 0-indexed (0 = January).
    """

    id: int
    description: str
    total_amount: Decimal
    installments: int
    start_month: int
    start_year: int
    installment_amount: Decimal
    created_at: datetime


@dataclass(frozen=True)
class ActiveCredit:
    """A credit together with its 1-indexed installment for a given month."""

    credit: Credit
    current_installment: int

    @property
    def installment_amount(self) -> Decimal:
        """Amount due for this credit in the month."""
        return self.credit.installment_amount

    @property
    def remaining_installments(self) -> int:
        """Installments left, counting the current one."""
        return self.credit.installments - self.current_installment + 1


@dataclass(frozen=True)
class CreditsSummary:
    """Outstanding credit obligations relative to a reference month."""

    total_remaining: Decimal
    active_count: int
    total_monthly: Decimal
    total_credits: int


@dataclass(frozen=True)
class MonthlyStats:
    """Aggregated figures for one calendar month."""

    income: Decimal
    variable_expenses: Decimal
    fixed_expenses: Decimal
    credits_expenses: Decimal
    total_expenses: Decimal
    balance: Decimal
