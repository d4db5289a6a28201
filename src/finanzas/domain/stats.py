"""Monthly statistics domain service."""

from datetime import tzinfo
from typing import Optional

from dateutil import tz as dateutil_tz

from finanzas.database.base import Database
from finanzas.domain import aggregator
from finanzas.domain.entities import ActiveCredit, CreditsSummary, MonthlyStats
from finanzas.domain.validation import require_month
from finanzas.utils.date_parser import current_month, month_bounds


class StatsService:
    """Service that feeds stored ledger snapshots into the aggregator.

    All three collections are fetched before any aggregation runs, so one
    call always works on a single consistent snapshot.
    """

    def __init__(self, db: Database, tz: Optional[tzinfo] = None):
        """Initialize stats service.

        Args:
            db: Database instance
            tz: Canonical timezone used to assign transactions to months;
                defaults to the machine's local zone, the same zone that
                decides what the current month is
        """
        self.db = db
        self.tz = tz or dateutil_tz.tzlocal()

    def monthly_stats(self, year: int, month: int) -> MonthlyStats:
        """Return income, expenses and balance for a month."""
        start, end = month_bounds(year, require_month(month), self.tz)
        transactions = self.db.list_transactions(start=start, end=end)
        fixed_expenses = self.db.list_fixed_expenses()
        credits = self.db.list_credits()
        return aggregator.monthly_stats(
            transactions, fixed_expenses, credits, year, month, tz=self.tz
        )

    def current_month_stats(self) -> MonthlyStats:
        """Return statistics for the current month in the canonical timezone."""
        year, month = current_month(self.tz)
        return self.monthly_stats(year, month)

    def credits_summary(self, year: int, month: int) -> CreditsSummary:
        """Summarize credit obligations as of a month."""
        return aggregator.credits_summary(self.db.list_credits(), year, month)

    def active_credits(self, year: int, month: int) -> list[ActiveCredit]:
        """Return credits with an installment due in a month."""
        return aggregator.active_credits_for_month(self.db.list_credits(), year, month)
