"""Fixed expense domain service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from finanzas.database.base import Database
from finanzas.domain.aggregator import ZERO
from finanzas.domain.entities import FixedExpense as FixedExpenseEntity
from finanzas.domain.errors import NotFoundError, fixed_expense_not_found
from finanzas.domain.validation import require_amount, require_description

logger = logging.getLogger(__name__)


class FixedExpenseService:
    """Service for managing recurring monthly expenses."""

    def __init__(self, db: Database):
        """Initialize fixed expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_fixed_expense(
        self,
        description: str,
        amount: Decimal,
        created_at: Optional[datetime] = None,
        external_id: Optional[str] = None,
    ) -> int:
        """Create a fixed expense.

        Returns:
            Fixed expense ID

        Raises:
            ValidationError: If description is blank or amount is not positive
        """
        expense_id = self.db.add_fixed_expense(
            description=require_description(description),
            amount=require_amount(amount),
            created_at=created_at,
            external_id=external_id,
        )
        logger.info("Created fixed expense %s", expense_id)
        return expense_id

    def get_fixed_expense(self, expense_id: int) -> Optional[FixedExpenseEntity]:
        """Get fixed expense by ID, or None if not found."""
        return self.db.get_fixed_expense(expense_id)

    def require_fixed_expense(self, expense_id: int) -> FixedExpenseEntity:
        """Get fixed expense by ID or raise NotFoundError."""
        expense = self.db.get_fixed_expense(expense_id)
        if expense is None:
            raise NotFoundError(fixed_expense_not_found(expense_id))
        return expense

    def update_fixed_expense(
        self,
        expense_id: int,
        description: Optional[str] = None,
        amount: Optional[Decimal] = None,
    ) -> None:
        """Update the provided fields of a fixed expense."""
        self.require_fixed_expense(expense_id)
        self.db.update_fixed_expense(
            expense_id=expense_id,
            description=require_description(description) if description is not None else None,
            amount=require_amount(amount) if amount is not None else None,
        )
        logger.info("Updated fixed expense %s", expense_id)

    def delete_fixed_expense(self, expense_id: int) -> None:
        """Delete a fixed expense."""
        self.require_fixed_expense(expense_id)
        self.db.delete_fixed_expense(expense_id)
        logger.info("Deleted fixed expense %s", expense_id)

    def list_fixed_expenses(self) -> list[FixedExpenseEntity]:
        """List all fixed expenses."""
        return self.db.list_fixed_expenses()

    def monthly_total(self) -> Decimal:
        """Return the amount all fixed expenses add to every month."""
        return sum((expense.amount for expense in self.db.list_fixed_expenses()), ZERO)
