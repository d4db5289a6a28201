"""Transaction management commands."""

import click
from finanzas.cli.error_handling import fail, handle_domain_error, parse_amount_or_exit
from finanzas.cli.month_filters import format_currency, resolve_cli_month
from finanzas.domain.aggregator import to_timezone
from finanzas.domain.entities import TransactionType
from finanzas.domain.errors import transaction_not_found
from finanzas.domain.transaction import TransactionService
from finanzas.utils.date_parser import format_month


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--month", help="Month to show (YYYY-MM or 'this month', 'last month'); defaults to current")
@click.option("--all", "show_all", is_flag=True, help="Show transactions from every month")
@click.option("--verbose", "-v", is_flag=True, help="Show creation timestamps")
@click.pass_context
def list_transactions(ctx, month: str | None, show_all: bool, verbose: bool):
    """View transactions, most recent first."""
    db = ctx.obj["db"]
    tz = ctx.obj.get("tz")
    service = TransactionService(db)

    if show_all:
        transactions = service.list_transactions()
        title = "all months"
    else:
        year, month_number = resolve_cli_month(ctx, month)
        transactions = service.list_transactions_for_month(year, month_number, tz=tz)
        title = format_month(year, month_number)

    if not transactions:
        click.echo(f"No transactions found for {title}.")
        return

    click.echo(f"\n{len(transactions)} transaction(s) for {title}:")
    click.echo("-" * 80)
    header = f"{'ID':<6} {'Date':<12} {'Type':<8} {'Amount':>14}  {'Description':<30}"
    if verbose:
        header += "  Created"
    click.echo(header)
    click.echo("-" * 80)

    for txn in transactions:
        local = to_timezone(txn.created_at, tz)
        line = (
            f"{txn.id:<6} {local.date().isoformat():<12} {txn.type.value:<8} "
            f"{format_currency(txn.amount):>14}  {txn.description[:30]:<30}"
        )
        if verbose:
            line += f"  {local.isoformat(timespec='seconds')}"
        click.echo(line)

    income = sum(txn.amount for txn in transactions if txn.type == TransactionType.INCOME)
    expenses = sum(txn.amount for txn in transactions if txn.type == TransactionType.EXPENSE)
    click.echo("-" * 80)
    click.echo(
        f"{'TOTAL':<6} Income: {format_currency(income)} | "
        f"Expenses: {format_currency(expenses)} | Count: {len(transactions)}"
    )


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--type", "txn_type", type=click.Choice(["income", "expense"], case_sensitive=False))
@click.option("--amount", help="New amount")
@click.option("--description", help="New description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    txn_type: str | None,
    amount: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. The creation date never changes.

    Examples:
        finanzas transaction update 1 --amount 750
        finanzas transaction update 1 --type income --description "Reintegro"
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    txn_amount = parse_amount_or_exit(ctx, amount) if amount is not None else None

    try:
        transaction_service.update_transaction(
            transaction_id=transaction_id,
            type=txn_type,
            amount=txn_amount,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        finanzas transaction delete 1
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    # Get transaction info for display
    txn = transaction_service.get_transaction(transaction_id)
    if txn is None:
        fail(ctx, transaction_not_found(transaction_id))

    # Confirm deletion
    if not yes and not click.confirm(
        f"Delete {txn.type.value} '{txn.description}' ({format_currency(txn.amount)})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        transaction_service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
