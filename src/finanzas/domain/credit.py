"""Credit (installment purchase) domain service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from finanzas.database.base import Database
from finanzas.domain import aggregator
from finanzas.domain.entities import ActiveCredit, Credit as CreditEntity, CreditsSummary
from finanzas.domain.errors import NotFoundError, ValidationError, credit_not_found
from finanzas.domain.validation import (
    require_amount,
    require_description,
    require_installments,
    require_month,
)

logger = logging.getLogger(__name__)


def _require_year(year) -> int:
    if isinstance(year, bool) or not isinstance(year, int) or year < 1:
        raise ValidationError(f"Start year must be a positive integer, got {year!r}")
    return year


class CreditService:
    """Service for managing credits paid in monthly installments."""

    def __init__(self, db: Database):
        """Initialize credit service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_credit(
        self,
        description: str,
        total_amount: Decimal,
        installments: int,
        start_month: int,
        start_year: int,
        created_at: Optional[datetime] = None,
        external_id: Optional[str] = None,
    ) -> int:
        """Create a credit.

        The installment amount is derived here as
        ``ceil(total_amount / installments)``.

        Args:
            description: What was bought
            total_amount: Total price, positive
            installments: Number of monthly installments (1-48)
            start_month: 0-indexed month of the first installment
            start_year: Year of the first installment
            created_at: Optional creation timestamp (defaults to now)
            external_id: Id of the record in the backend it was imported from

        Returns:
            Credit ID

        Raises:
            ValidationError: If any value is out of range
        """
        total = require_amount(total_amount, "Total amount")
        count = require_installments(installments)

        credit_id = self.db.add_credit(
            description=require_description(description),
            total_amount=total,
            installments=count,
            start_month=require_month(start_month),
            start_year=_require_year(start_year),
            installment_amount=aggregator.installment_amount(total, count),
            created_at=created_at,
            external_id=external_id,
        )
        logger.info("Created credit %s: %s in %s installments", credit_id, total, count)
        return credit_id

    def get_credit(self, credit_id: int) -> Optional[CreditEntity]:
        """Get credit by ID, or None if not found."""
        return self.db.get_credit(credit_id)

    def require_credit(self, credit_id: int) -> CreditEntity:
        """Get credit by ID or raise NotFoundError."""
        credit = self.db.get_credit(credit_id)
        if credit is None:
            raise NotFoundError(credit_not_found(credit_id))
        return credit

    def update_credit(
        self,
        credit_id: int,
        description: Optional[str] = None,
        total_amount: Optional[Decimal] = None,
        installments: Optional[int] = None,
        start_month: Optional[int] = None,
        start_year: Optional[int] = None,
    ) -> None:
        """Update the provided fields of a credit.

        The installment amount is recomputed whenever the total or the
        installment count changes.
        """
        credit = self.require_credit(credit_id)

        total = require_amount(total_amount, "Total amount") if total_amount is not None else None
        count = require_installments(installments) if installments is not None else None

        new_installment_amount = None
        if total is not None or count is not None:
            new_installment_amount = aggregator.installment_amount(
                total if total is not None else credit.total_amount,
                count if count is not None else credit.installments,
            )

        self.db.update_credit(
            credit_id=credit_id,
            description=require_description(description) if description is not None else None,
            total_amount=total,
            installments=count,
            start_month=require_month(start_month) if start_month is not None else None,
            start_year=_require_year(start_year) if start_year is not None else None,
            installment_amount=new_installment_amount,
        )
        logger.info("Updated credit %s", credit_id)

    def delete_credit(self, credit_id: int) -> None:
        """Delete a credit, dropping any remaining obligation."""
        self.require_credit(credit_id)
        self.db.delete_credit(credit_id)
        logger.info("Deleted credit %s", credit_id)

    def list_credits(self) -> list[CreditEntity]:
        """List all credits."""
        return self.db.list_credits()

    def active_for_month(self, year: int, month: int) -> list[ActiveCredit]:
        """Return credits with an installment due in the given month."""
        return aggregator.active_credits_for_month(self.db.list_credits(), year, month)

    def summary(self, year: int, month: int) -> CreditsSummary:
        """Summarize credit obligations as of the given month."""
        return aggregator.credits_summary(self.db.list_credits(), year, month)
