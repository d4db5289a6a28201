"""CLI error handling helpers.

Every command failure goes through ``fail`` so that errors always land on
stderr with the same "Error: ..." prefix and exit status 1.
"""

import logging
from decimal import Decimal

import click

from finanzas.domain.errors import DomainError
from finanzas.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)


def fail(ctx: click.Context, message: object) -> None:
    """Print an error message and exit with failure."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command %s failed: %r", ctx.info_name, error)
    fail(ctx, error)


def parse_amount_or_exit(ctx: click.Context, amount: str) -> Decimal:
    """Parse a command-line amount, exiting with an error if it is malformed."""
    try:
        return parse_amount(amount)
    except ValueError as e:
        fail(ctx, f"Invalid amount format: {e}")
