"""Monthly statistics command."""

import click
from finanzas.cli.error_handling import handle_domain_error
from finanzas.cli.month_filters import format_currency, resolve_cli_month
from finanzas.domain.stats import StatsService
from finanzas.utils.date_parser import format_month


@click.command("stats")
@click.option("--month", help="Month to summarize (YYYY-MM or 'last month'); defaults to current")
@click.pass_context
def show_stats(ctx, month: str | None):
    """Show income, expenses and balance for a month.

    Examples:
        finanzas stats
        finanzas stats --month 2024-05
    """
    service = StatsService(ctx.obj["db"], tz=ctx.obj.get("tz"))
    year, month_number = resolve_cli_month(ctx, month)

    try:
        stats = service.monthly_stats(year, month_number)
    except ValueError as e:
        handle_domain_error(ctx, e)

    rows = [
        ("Income", stats.income),
        ("Variable expenses", stats.variable_expenses),
        ("Fixed expenses", stats.fixed_expenses),
        ("Credit installments", stats.credits_expenses),
        ("Total expenses", stats.total_expenses),
    ]

    click.echo(f"\n{format_month(year, month_number)}")
    click.echo("=" * 40)
    for label, value in rows:
        click.echo(f"{label:<22} {format_currency(value):>17}")
    click.echo("-" * 40)
    click.echo(f"{'Balance':<22} {format_currency(stats.balance):>17}")


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(show_stats)
