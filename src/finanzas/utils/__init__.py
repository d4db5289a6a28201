"""Utility functions for finanzas."""

from finanzas.utils.amount_parser import parse_amount
from finanzas.utils.date_parser import parse_month, parse_timestamp, get_timezone

__all__ = ["parse_amount", "parse_month", "parse_timestamp", "get_timezone"]
