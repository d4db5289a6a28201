"""Backup import command."""

import click
from finanzas.cli.error_handling import handle_domain_error
from finanzas.domain.backup_import import BackupImportService


@click.command("import-backup")
@click.argument("backup_file", type=click.Path(exists=True))
@click.pass_context
def import_backup(ctx, backup_file: str):
    """Import a JSON backup of transactions, fixed expenses and credits.

    Accepts the browser-storage export (finanzas_transactions, ...) as well
    as plain transactions / fixed_expenses / credits lists.
    """
    db = ctx.obj["db"]
    service = BackupImportService(db)

    try:
        result = service.import_file(backup_file)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Imported {result['transactions']} transaction(s)")
    click.echo(f"Imported {result['fixed_expenses']} fixed expense(s)")
    click.echo(f"Imported {result['credits']} credit(s)")
    if result["skipped"]:
        click.echo(f"Skipped {result['skipped']} record(s) already imported")

    if result["errors"]:
        click.echo(f"\n{len(result['errors'])} record(s) rejected:", err=True)
        for error in result["errors"]:
            click.echo(f"  {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_backup)
