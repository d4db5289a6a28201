"""CLI helpers for month resolution and amount display."""

from decimal import Decimal

import click

from finanzas.cli.error_handling import fail
from finanzas.utils.date_parser import current_month, parse_month


def resolve_cli_month(ctx: click.Context, month: str | None) -> tuple[int, int]:
    """Resolve a --month option into (year, 0-indexed month), or exit on error.

    Defaults to the current month in the configured timezone.
    """
    tz = ctx.obj.get("tz") if ctx.obj else None
    if not month:
        return current_month(tz)

    try:
        return parse_month(month, tz=tz)
    except ValueError as e:
        fail(ctx, f"Invalid month: {e}")


def format_currency(amount: Decimal) -> str:
    """Format an amount with thousands separators, e.g. "$1,234.00"."""
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"
