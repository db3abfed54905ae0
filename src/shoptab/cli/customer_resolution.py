"""CLI helpers for customer resolution and display."""

from __future__ import annotations

import click
from shoptab.domain.entities import Customer
from shoptab.domain.errors import DomainError
from shoptab.domain.ledger import LedgerService
from shoptab.utils.customer_resolver import resolve_customer


def resolve_customer_or_exit(
    ctx: click.Context, ledger: LedgerService, reference: str
) -> Customer:
    """Resolve a customer reference, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        customer_id = resolve_customer(ledger, reference)
    except DomainError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
    return ledger.get_customer(customer_id)


def format_money(amount) -> str:
    """Format an amount for display, e.g. $1,234.50 or -$20.00."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
