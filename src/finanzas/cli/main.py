"""Main CLI entry point."""

import logging

import click
from finanzas.cli.error_handling import fail
from finanzas.database.factories import create_database
from finanzas.utils.date_parser import get_timezone

# Import and register all commands at module level
from finanzas.cli.commands import (
    add,
    transaction,
    fixed,
    credit,
    stats,
    import_cmd,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides FINANZAS_DB_PATH environment variable)",
    envvar="FINANZAS_DB_PATH",
)
@click.option(
    "--database-url",
    help="SQLAlchemy URL of a remote database; takes precedence over --db-path",
    envvar="FINANZAS_DATABASE_URL",
)
@click.option(
    "--timezone",
    "timezone_name",
    help="Timezone that decides which month a transaction belongs to (default: local)",
    envvar="FINANZAS_TIMEZONE",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FINANZAS_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(
    ctx,
    db_path: str | None,
    database_url: str | None,
    timezone_name: str | None,
    log_level: str,
):
    """Finanzas - Personal finance tracker.

    Record income and expenses, recurring fixed expenses and purchases paid
    in installments, then review monthly totals and balance.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ctx.obj["tz"] = get_timezone(timezone_name)
    except ValueError as e:
        fail(ctx, e)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_url=database_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
fixed.register_commands(cli)
credit.register_commands(cli)
stats.register_commands(cli)
import_cmd.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
