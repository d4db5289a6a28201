"""Transaction domain service."""

import logging
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Optional

from dateutil import tz as dateutil_tz

from finanzas.database.base import Database
from finanzas.domain import aggregator
from finanzas.domain.entities import Transaction as TransactionEntity, TransactionType
from finanzas.domain.errors import NotFoundError, transaction_not_found
from finanzas.domain.validation import (
    require_amount,
    require_description,
    require_month,
    require_type,
)
from finanzas.utils.date_parser import month_bounds

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for managing income and expense transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        type: TransactionType | str,
        amount: Decimal,
        description: str,
        created_at: Optional[datetime] = None,
        external_id: Optional[str] = None,
    ) -> int:
        """Create a transaction.

        Args:
            type: "income" or "expense"
            amount: Positive amount
            description: Short label
            created_at: Optional creation timestamp (defaults to now)
            external_id: Id of the record in the backend it was imported from

        Returns:
            Transaction ID

        Raises:
            ValidationError: If type, amount or description is invalid
        """
        txn_type = require_type(type)
        txn_amount = require_amount(amount)
        txn_description = require_description(description)

        transaction_id = self.db.add_transaction(
            type=txn_type,
            amount=txn_amount,
            description=txn_description,
            created_at=created_at,
            external_id=external_id,
        )
        logger.info("Created %s transaction %s for %s", txn_type.value, transaction_id, txn_amount)
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID or raise NotFoundError."""
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        transaction_id: int,
        type: Optional[TransactionType | str] = None,
        amount: Optional[Decimal] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update transaction fields.

        Only type, amount and description are editable; the creation
        timestamp never changes.

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If a provided value is invalid
        """
        self.require_transaction(transaction_id)

        self.db.update_transaction(
            transaction_id=transaction_id,
            type=require_type(type) if type is not None else None,
            amount=require_amount(amount) if amount is not None else None,
            description=require_description(description) if description is not None else None,
        )
        logger.info("Updated transaction %s", transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        self.require_transaction(transaction_id)
        self.db.delete_transaction(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)

    def list_transactions(self) -> list[TransactionEntity]:
        """List all transactions, most recent first."""
        return self.db.list_transactions()

    def list_transactions_for_month(
        self, year: int, month: int, tz: Optional[tzinfo] = None
    ) -> list[TransactionEntity]:
        """List transactions created in a calendar month, most recent first.

        Args:
            year: Calendar year
            month: 0-indexed month
            tz: Timezone that decides which month a timestamp belongs to
                (default: local zone)
        """
        tz = tz or dateutil_tz.tzlocal()
        start, end = month_bounds(year, require_month(month), tz)
        transactions = self.db.list_transactions(start=start, end=end)
        return aggregator.transactions_for_month(transactions, year, month, tz)
