"""Import of JSON ledger backups."""

import json
import logging
from pathlib import Path
from typing import Any, Callable

from finanzas.database.base import Database
from finanzas.domain.credit import CreditService
from finanzas.domain.errors import DomainError, ValidationError
from finanzas.domain.fixed_expense import FixedExpenseService
from finanzas.domain.records import (
    normalize_credit,
    normalize_fixed_expense,
    normalize_transaction,
)
from finanzas.domain.transaction import TransactionService

logger = logging.getLogger(__name__)

# Section name -> keys it may appear under (browser storage keys first)
SECTION_KEYS = {
    "transactions": ("finanzas_transactions", "transactions"),
    "fixed_expenses": ("finanzas_fixed_expenses", "fixed_expenses", "fixedExpenses"),
    "credits": ("finanzas_credits", "credits"),
}


class BackupImportService:
    """Service for importing a ledger exported from browser storage or the API."""

    def __init__(self, db: Database):
        """Initialize backup import service.

        Args:
            db: Database instance
        """
        self.db = db
        self.transaction_service = TransactionService(db)
        self.fixed_expense_service = FixedExpenseService(db)
        self.credit_service = CreditService(db)

    def import_file(self, file_path: str) -> dict[str, Any]:
        """Import a JSON backup file.

        Args:
            file_path: Path to the JSON file

        Returns:
            Dict with import statistics:
            - transactions: number of transactions imported
            - fixed_expenses: number of fixed expenses imported
            - credits: number of credits imported
            - skipped: number of records already imported earlier (same source id)
            - errors: list of error messages for records that were skipped

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the file is not a JSON object
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Backup file not found: {file_path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValidationError(f"Backup file is not valid JSON: {e}")

        return self.import_data(data)

    def import_data(self, data: Any) -> dict[str, Any]:
        """Import an already-decoded backup object."""
        if not isinstance(data, dict):
            raise ValidationError("Backup must be a JSON object")

        # Section -> (normalizer, duplicate check, creator)
        handlers: dict[str, tuple[Callable, Callable[[str], bool], Callable[..., int]]] = {
            "transactions": (
                normalize_transaction,
                self.db.transaction_exists,
                self.transaction_service.create_transaction,
            ),
            "fixed_expenses": (
                normalize_fixed_expense,
                self.db.fixed_expense_exists,
                self.fixed_expense_service.create_fixed_expense,
            ),
            "credits": (
                normalize_credit,
                self.db.credit_exists,
                self.credit_service.create_credit,
            ),
        }

        result: dict[str, Any] = {section: 0 for section in handlers}
        result["skipped"] = 0
        errors: list[str] = []

        for section, (normalize, exists, create) in handlers.items():
            records = self._section_records(data, section)
            if not isinstance(records, list):
                errors.append(f"{section}: expected a list, got {type(records).__name__}")
                continue

            for position, raw in enumerate(records, start=1):
                if not isinstance(raw, dict):
                    errors.append(f"{section} #{position}: expected an object")
                    continue
                try:
                    record = normalize(raw)
                    if record["external_id"] and exists(record["external_id"]):
                        result["skipped"] += 1
                        continue
                    create(**record)
                except DomainError as e:
                    errors.append(f"{section} #{position}: {e}")
                    continue
                result[section] += 1

        result["errors"] = errors
        logger.info(
            "Imported %s transactions, %s fixed expenses, %s credits (%s skipped, %s errors)",
            result["transactions"],
            result["fixed_expenses"],
            result["credits"],
            result["skipped"],
            len(errors),
        )
        return result

    def _section_records(self, data: dict[str, Any], section: str) -> Any:
        for key in SECTION_KEYS[section]:
            if key in data:
                return data[key]
        return []

