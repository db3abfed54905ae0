"""CLI error handling helpers."""

import click

from shoptab.domain.errors import DomainError
from shoptab.domain.ledger import LedgerService


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def load_ledger(ctx: click.Context) -> LedgerService:
    """Build the ledger from the context store, or exit if stored data is unreadable."""
    try:
        return LedgerService(ctx.obj["db"])
    except DomainError as e:
        handle_domain_error(ctx, e)
