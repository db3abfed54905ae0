"""Reminder command."""

import click
from shoptab.cli.customer_resolution import resolve_customer_or_exit
from shoptab.cli.error_handling import handle_domain_error, load_ledger
from shoptab.domain.errors import DomainError
from shoptab.domain.reminder import (
    METHOD_AUTO,
    METHOD_CLIPBOARD,
    METHOD_PRINT,
    METHODS,
    ReminderService,
)
from shoptab.domain.template import TemplateService


@click.command("remind")
@click.argument("customer_ref", metavar="CUSTOMER")
@click.option(
    "--method",
    type=click.Choice(METHODS),
    default=METHOD_AUTO,
    show_default=True,
    help="Open the SMS app, copy to clipboard, or just print the message",
)
@click.pass_context
def send_reminder(ctx, customer_ref: str, method: str):
    """Send a balance reminder to a customer.

    On phones the messaging app opens with the message filled in; elsewhere
    the message is copied to the clipboard.
    """
    ledger = load_ledger(ctx)
    customer = resolve_customer_or_exit(ctx, ledger, customer_ref)
    template = TemplateService(ctx.obj["db"]).get_template()

    try:
        result = ReminderService().send_reminder(customer, template, method=method)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if result.method == METHOD_CLIPBOARD:
        click.echo("Message copied to clipboard:\n")
    elif result.method != METHOD_PRINT:
        click.echo(f"Opened messaging app for {customer.phone}:\n")
    click.echo(result.message)


def register_commands(cli):
    """Register remind command with main CLI."""
    cli.add_command(send_reminder)
