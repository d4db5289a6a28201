"""Quick add transaction command."""

import click
from finanzas.cli.error_handling import fail, handle_domain_error, parse_amount_or_exit
from finanzas.cli.month_filters import format_currency
from finanzas.domain.transaction import TransactionService
from finanzas.utils.date_parser import parse_timestamp


@click.command("add")
@click.argument("type", type=click.Choice(["income", "expense"], case_sensitive=False))
@click.argument("amount")
@click.argument("description", nargs=-1, required=True)
@click.option(
    "--date",
    help="When it happened (YYYY-MM-DD, 'yesterday', ...); defaults to now",
)
@click.pass_context
def add_transaction(ctx, type: str, amount: str, description: tuple[str, ...], date: str | None):
    """Add an income or expense.

    Examples:
        finanzas add expense 500 Supermercado
        finanzas add income 30000 Sueldo --date 2024-05-01
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    txn_amount = parse_amount_or_exit(ctx, amount)

    # Parse date
    created_at = None
    if date is not None:
        try:
            created_at = parse_timestamp(date, tz=ctx.obj.get("tz"))
        except ValueError as e:
            fail(ctx, f"Invalid date format: {e}")

    text = " ".join(description)
    try:
        transaction_id = transaction_service.create_transaction(
            type=type,
            amount=txn_amount,
            description=text,
            created_at=created_at,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    txn = transaction_service.get_transaction(transaction_id)
    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Type: {txn.type.value}")
    click.echo(f"  Amount: {format_currency(txn.amount)}")
    click.echo(f"  Description: {txn.description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
