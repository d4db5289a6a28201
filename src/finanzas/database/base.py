"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from finanzas.domain.entities import (
    Transaction,
    TransactionType,
    FixedExpense,
    Credit,
)


class Database(ABC):
    """Abstract database interface for finanzas.

    Every entity type gets the same capability set (list, get, add, update,
    delete), so services never need to know which concrete store is active.
    Update and delete raise NotFoundError for unknown IDs.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Transaction operations
    @abstractmethod
    def add_transaction(
        self,
        type: TransactionType,
        amount: Decimal,
        description: str,
        created_at: Optional[datetime] = None,
        external_id: Optional[str] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID.

        ``created_at`` defaults to now and is never changed afterwards.
        ``external_id`` is the record id in the backend it was imported from.
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Transaction]:
        """List transactions, most recent first.

        Args:
            start: Optional inclusive lower bound on created_at
            end: Optional exclusive upper bound on created_at
        """
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        type: Optional[TransactionType] = None,
        amount: Optional[Decimal] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update the editable transaction fields that are provided."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def transaction_exists(self, external_id: str) -> bool:
        """Check if a transaction imported under external_id exists."""
        pass

    # Fixed expense operations
    @abstractmethod
    def add_fixed_expense(
        self,
        description: str,
        amount: Decimal,
        created_at: Optional[datetime] = None,
        external_id: Optional[str] = None,
    ) -> int:
        """Create a fixed expense. Returns fixed expense ID."""
        pass

    @abstractmethod
    def get_fixed_expense(self, expense_id: int) -> Optional[FixedExpense]:
        """Get fixed expense by ID."""
        pass

    @abstractmethod
    def list_fixed_expenses(self) -> list[FixedExpense]:
        """List all fixed expenses in creation order."""
        pass

    @abstractmethod
    def update_fixed_expense(
        self,
        expense_id: int,
        description: Optional[str] = None,
        amount: Optional[Decimal] = None,
    ) -> None:
        """Update fixed expense fields that are provided."""
        pass

    @abstractmethod
    def delete_fixed_expense(self, expense_id: int) -> None:
        """Delete a fixed expense."""
        pass

    @abstractmethod
    def fixed_expense_exists(self, external_id: str) -> bool:
        """Check if a fixed expense imported under external_id exists."""
        pass

    # Credit operations
    @abstractmethod
    def add_credit(
        self,
        description: str,
        total_amount: Decimal,
        installments: int,
        start_month: int,
        start_year: int,
        installment_amount: Decimal,
        created_at: Optional[datetime] = None,
        external_id: Optional[str] = None,
    ) -> int:
        """Create a credit. Returns credit ID.

        The caller computes ``installment_amount``; the store persists it as is.
        """
        pass

    @abstractmethod
    def get_credit(self, credit_id: int) -> Optional[Credit]:
        """Get credit by ID."""
        pass

    @abstractmethod
    def list_credits(self) -> list[Credit]:
        """List all credits in creation order."""
        pass

    @abstractmethod
    def update_credit(
        self,
        credit_id: int,
        description: Optional[str] = None,
        total_amount: Optional[Decimal] = None,
        installments: Optional[int] = None,
        start_month: Optional[int] = None,
        start_year: Optional[int] = None,
        installment_amount: Optional[Decimal] = None,
    ) -> None:
        """Update credit fields that are provided."""
        pass

    @abstractmethod
    def delete_credit(self, credit_id: int) -> None:
        """Delete a credit."""
        pass

    @abstractmethod
    def credit_exists(self, external_id: str) -> bool:
        """Check if a credit imported under external_id exists."""
        pass
