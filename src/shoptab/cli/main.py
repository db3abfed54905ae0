"""Main CLI entry point."""

import logging

import click
from shoptab.database.factories import create_sqlite_store

# Import and register all commands at module level
from shoptab.cli.commands import customer, remind, template, backup

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SHOPTAB_DB_PATH environment variable)",
    envvar="SHOPTAB_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log ledger activity to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Shoptab - Shop credit tracker.

    Keep track of customer tabs, record purchases and payments, and send
    balance reminders.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, force=True)

    # Open the store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_store(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
customer.register_commands(cli)
remind.register_commands(cli)
template.register_commands(cli)
backup.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
