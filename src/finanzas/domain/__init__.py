"""Domain layer for finanzas application.

Services are imported from their own modules (``finanzas.domain.credit`` and
so on); this package only re-exports the database-independent pieces.
"""

from finanzas.domain.aggregator import (
    active_credits_for_month,
    credits_summary,
    installment_amount,
    monthly_stats,
)
from finanzas.domain.entities import (
    ActiveCredit,
    Credit,
    CreditsSummary,
    FixedExpense,
    MonthlyStats,
    Transaction,
    TransactionType,
)

__all__ = [
    "active_credits_for_month",
    "credits_summary",
    "installment_amount",
    "monthly_stats",
    "ActiveCredit",
    "Credit",
    "CreditsSummary",
    "FixedExpense",
    "MonthlyStats",
    "Transaction",
    "TransactionType",
]
