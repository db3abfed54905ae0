"""Backup export and import commands."""

import click
from shoptab.cli.error_handling import handle_domain_error, load_ledger
from shoptab.domain.backup import DEFAULT_BACKUP_FILENAME, BackupService
from shoptab.domain.errors import DomainError


@click.command("export")
@click.argument("output", type=click.Path(dir_okay=False), default=DEFAULT_BACKUP_FILENAME)
@click.pass_context
def export_data(ctx, output: str):
    """Export all customers to a JSON backup file."""
    service = BackupService(load_ledger(ctx))
    try:
        count = service.write_backup(output)
    except OSError as e:
        click.echo(f"Error: Could not write {output}: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Exported {count} customers to {output}")


@click.command("import")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def import_data(ctx, backup_file: str, yes: bool):
    """Import customers from a JSON backup, replacing all current data."""
    service = BackupService(load_ledger(ctx))

    try:
        document = service.read_backup(backup_file)
    except (DomainError, UnicodeDecodeError) as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Import {len(document)} customers? This will replace your current data."
    ):
        click.echo("Import cancelled.")
        return

    try:
        count = service.import_document(document)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Imported {count} customers.")


def register_commands(cli):
    """Register backup commands with main CLI."""
    cli.add_command(export_data)
    cli.add_command(import_data)
