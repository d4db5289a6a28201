"""Credit (installment purchase) commands."""

import click
from finanzas.cli.error_handling import fail, handle_domain_error, parse_amount_or_exit
from finanzas.cli.month_filters import format_currency, resolve_cli_month
from finanzas.domain.aggregator import credit_end, credit_status, months_between
from finanzas.domain.credit import CreditService
from finanzas.domain.entities import CreditStatus
from finanzas.domain.errors import credit_not_found
from finanzas.utils.date_parser import format_month

MONTH_HELP = "Month (YYYY-MM or 'this month', 'next month'); defaults to current"


@click.group()
def credit_group():
    """Manage purchases paid in installments."""
    pass


@credit_group.command("add")
@click.argument("total_amount")
@click.argument("installments", type=int)
@click.argument("description", nargs=-1, required=True)
@click.option("--start", help="Month of the first installment. " + MONTH_HELP)
@click.pass_context
def add_credit(ctx, total_amount: str, installments: int, description: tuple[str, ...], start: str | None):
    """Add a credit paid in monthly installments.

    Examples:
        finanzas credit add 10000 3 TV Samsung
        finanzas credit add 24000 12 Celular --start 2024-06
    """
    service = CreditService(ctx.obj["db"])
    total = parse_amount_or_exit(ctx, total_amount)
    start_year, start_month = resolve_cli_month(ctx, start)

    try:
        credit_id = service.create_credit(
            description=" ".join(description),
            total_amount=total,
            installments=installments,
            start_month=start_month,
            start_year=start_year,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    credit = service.get_credit(credit_id)
    end_year, end_month = credit_end(credit)
    click.echo(f"Created credit {credit_id}")
    click.echo(
        f"  {credit.installments} x {format_currency(credit.installment_amount)} "
        f"from {format_month(credit.start_year, credit.start_month)} "
        f"to {format_month(end_year, end_month)}"
    )


@credit_group.command("list")
@click.option("--month", help="Reference month for status. " + MONTH_HELP)
@click.pass_context
def list_credits(ctx, month: str | None):
    """List credits with their status in a month."""
    service = CreditService(ctx.obj["db"])
    year, month_number = resolve_cli_month(ctx, month)
    credits = service.list_credits()

    if not credits:
        click.echo("No credits found.")
        return

    click.echo(f"Credits as of {format_month(year, month_number)}:")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Description':<24} {'Total':>14} {'Installment':>14}  Status")
    click.echo("-" * 90)
    for credit in credits:
        status = credit_status(credit, year, month_number)
        if status == CreditStatus.ACTIVE:
            current = months_between(credit.start_year, credit.start_month, year, month_number) + 1
            label = f"installment {current}/{credit.installments}"
        elif status == CreditStatus.NOT_STARTED:
            label = f"starts {format_month(credit.start_year, credit.start_month)}"
        else:
            label = "paid"
        click.echo(
            f"{credit.id:<6} {credit.description[:24]:<24} {format_currency(credit.total_amount):>14} "
            f"{format_currency(credit.installment_amount):>14}  {label}"
        )


@credit_group.command("active")
@click.option("--month", help=MONTH_HELP)
@click.pass_context
def active_credits(ctx, month: str | None):
    """Show installments due in a month."""
    service = CreditService(ctx.obj["db"])
    year, month_number = resolve_cli_month(ctx, month)
    active = service.active_for_month(year, month_number)

    if not active:
        click.echo(f"No installments due in {format_month(year, month_number)}.")
        return

    click.echo(f"Installments due in {format_month(year, month_number)}:")
    for item in active:
        click.echo(
            f"  {item.credit.description:<30} {item.current_installment}/{item.credit.installments}"
            f"  {format_currency(item.installment_amount):>14}"
        )


@credit_group.command("summary")
@click.option("--month", help="Reference month. " + MONTH_HELP)
@click.pass_context
def credits_summary(ctx, month: str | None):
    """Show what is owed on credits as of a month."""
    service = CreditService(ctx.obj["db"])
    year, month_number = resolve_cli_month(ctx, month)
    summary = service.summary(year, month_number)

    click.echo(f"Credits summary for {format_month(year, month_number)}")
    click.echo(f"  Installments this month: {format_currency(summary.total_monthly)}")
    click.echo(f"  Remaining to pay:        {format_currency(summary.total_remaining)}")
    click.echo(f"  Active credits:          {summary.active_count} of {summary.total_credits}")


@credit_group.command("update")
@click.argument("credit_id", type=int)
@click.option("--description", help="New description")
@click.option("--total", "total_amount", help="New total amount")
@click.option("--installments", type=int, help="New number of installments")
@click.option("--start", help="New month of the first installment (YYYY-MM)")
@click.pass_context
def update_credit(
    ctx,
    credit_id: int,
    description: str | None,
    total_amount: str | None,
    installments: int | None,
    start: str | None,
):
    """Update a credit; the installment amount is recomputed."""
    service = CreditService(ctx.obj["db"])
    total = parse_amount_or_exit(ctx, total_amount) if total_amount is not None else None

    start_year = start_month = None
    if start is not None:
        start_year, start_month = resolve_cli_month(ctx, start)

    try:
        service.update_credit(
            credit_id,
            description=description,
            total_amount=total,
            installments=installments,
            start_month=start_month,
            start_year=start_year,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated credit {credit_id}")


@credit_group.command("delete")
@click.argument("credit_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_credit(ctx, credit_id: int, yes: bool):
    """Delete a credit and any remaining installments."""
    service = CreditService(ctx.obj["db"])

    credit = service.get_credit(credit_id)
    if credit is None:
        fail(ctx, credit_not_found(credit_id))

    if not yes and not click.confirm(f"Delete credit '{credit.description}'?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_credit(credit_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted credit {credit_id}")


def register_commands(cli: click.Group) -> None:
    """Register credit commands with main CLI."""
    cli.add_command(credit_group, name="credit")
