"""Normalization of raw ledger records coming from other backends.

The browser store writes camelCase fields (``createdAt``, ``totalAmount``)
while the relational backend uses snake_case (``created_at``,
``total_amount``). Both are reduced here to the keyword arguments the entry
services take.
"""

import re
from datetime import datetime, UTC
from decimal import Decimal
from typing import Any, Optional

from dateutil import parser as date_parser

from finanzas.domain.errors import ValidationError
from finanzas.utils.amount_parser import parse_amount

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case_keys(raw: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``raw`` with camelCase keys converted to snake_case."""
    return {_CAMEL_BOUNDARY.sub("_", key).lower(): value for key, value in raw.items()}


def _required(record: dict[str, Any], field: str) -> Any:
    value = record.get(field)
    if value is None or value == "":
        raise ValidationError(f"Missing field '{field}'")
    return value


def _to_decimal(value: Any, field: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"Field '{field}' must be a number, got {value!r}")
    if isinstance(value, str):
        try:
            return parse_amount(value)
        except ValueError as e:
            raise ValidationError(f"Field '{field}': {e}")
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))
    raise ValidationError(f"Field '{field}' must be a number, got {value!r}")


def _to_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Field '{field}' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValidationError(f"Field '{field}' must be an integer, got {value!r}")


def _to_external_id(value: Any) -> Optional[str]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip() or None


def _to_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        try:
            dt = date_parser.isoparse(value)
        except ValueError as e:
            raise ValidationError(f"Field 'created_at': invalid timestamp {value!r}: {e}")
    else:
        raise ValidationError(f"Field 'created_at': invalid timestamp {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def normalize_transaction(raw: dict[str, Any]) -> dict[str, Any]:
    """Normalize a raw transaction record.

    Returns:
        Dict with ``type``, ``amount``, ``description``, ``created_at``
        and ``external_id`` (the source record id, if any)
    """
    record = snake_case_keys(raw)
    return {
        "type": str(_required(record, "type")),
        "amount": _to_decimal(_required(record, "amount"), "amount"),
        "description": str(record.get("description") or ""),
        "created_at": _to_timestamp(record.get("created_at")),
        "external_id": _to_external_id(record.get("id")),
    }


def normalize_fixed_expense(raw: dict[str, Any]) -> dict[str, Any]:
    """Normalize a raw fixed expense record."""
    record = snake_case_keys(raw)
    return {
        "description": str(record.get("description") or ""),
        "amount": _to_decimal(_required(record, "amount"), "amount"),
        "created_at": _to_timestamp(record.get("created_at")),
        "external_id": _to_external_id(record.get("id")),
    }


def normalize_credit(raw: dict[str, Any]) -> dict[str, Any]:
    """Normalize a raw credit record.

    A stored installment amount is dropped; it is always recomputed from the
    total and the installment count.
    """
    record = snake_case_keys(raw)
    return {
        "description": str(record.get("description") or ""),
        "total_amount": _to_decimal(_required(record, "total_amount"), "total_amount"),
        "installments": _to_int(_required(record, "installments"), "installments"),
        "start_month": _to_int(_required(record, "start_month"), "start_month"),
        "start_year": _to_int(_required(record, "start_year"), "start_year"),
        "created_at": _to_timestamp(record.get("created_at")),
        "external_id": _to_external_id(record.get("id")),
    }
