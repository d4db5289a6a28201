"""Fixed expense commands."""

import click
from finanzas.cli.error_handling import fail, handle_domain_error, parse_amount_or_exit
from finanzas.cli.month_filters import format_currency
from finanzas.domain.errors import fixed_expense_not_found
from finanzas.domain.fixed_expense import FixedExpenseService


@click.group()
def fixed_group():
    """Manage fixed monthly expenses."""
    pass


@fixed_group.command("add")
@click.argument("amount")
@click.argument("description", nargs=-1, required=True)
@click.pass_context
def add_fixed_expense(ctx, amount: str, description: tuple[str, ...]):
    """Add a fixed expense that applies to every month.

    Examples:
        finanzas fixed add 2000 Internet
    """
    service = FixedExpenseService(ctx.obj["db"])
    expense_amount = parse_amount_or_exit(ctx, amount)

    try:
        expense_id = service.create_fixed_expense(
            description=" ".join(description), amount=expense_amount
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created fixed expense {expense_id}")


@fixed_group.command("list")
@click.pass_context
def list_fixed_expenses(ctx):
    """List fixed expenses and their monthly total."""
    service = FixedExpenseService(ctx.obj["db"])
    expenses = service.list_fixed_expenses()

    if not expenses:
        click.echo("No fixed expenses found.")
        return

    click.echo(f"{'ID':<6} {'Amount':>14}  Description")
    click.echo("-" * 60)
    for expense in expenses:
        click.echo(f"{expense.id:<6} {format_currency(expense.amount):>14}  {expense.description}")
    click.echo("-" * 60)
    click.echo(f"{'TOTAL':<6} {format_currency(service.monthly_total()):>14}  per month")


@fixed_group.command("update")
@click.argument("expense_id", type=int)
@click.option("--amount", help="New amount")
@click.option("--description", help="New description")
@click.pass_context
def update_fixed_expense(ctx, expense_id: int, amount: str | None, description: str | None):
    """Update a fixed expense."""
    service = FixedExpenseService(ctx.obj["db"])
    expense_amount = parse_amount_or_exit(ctx, amount) if amount is not None else None

    try:
        service.update_fixed_expense(expense_id, description=description, amount=expense_amount)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated fixed expense {expense_id}")


@fixed_group.command("delete")
@click.argument("expense_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_fixed_expense(ctx, expense_id: int, yes: bool):
    """Delete a fixed expense."""
    service = FixedExpenseService(ctx.obj["db"])

    expense = service.get_fixed_expense(expense_id)
    if expense is None:
        fail(ctx, fixed_expense_not_found(expense_id))

    if not yes and not click.confirm(f"Delete fixed expense '{expense.description}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_fixed_expense(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted fixed expense {expense_id}")


def register_commands(cli: click.Group) -> None:
    """Register fixed expense commands with main CLI."""
    cli.add_command(fixed_group, name="fixed")
