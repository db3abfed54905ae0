"""Reminder template commands."""

import click
from shoptab.cli.error_handling import handle_domain_error
from shoptab.domain.errors import DomainError
from shoptab.domain.template import TemplateService


@click.group()
def template_group():
    """Manage the SMS reminder template.

    Use {name} for the customer name and {amount} for the amount owed.
    """
    pass


@template_group.command("show")
@click.pass_context
def show_template(ctx):
    """Show the current template."""
    service = TemplateService(ctx.obj["db"])
    click.echo(service.get_template())


@template_group.command("set")
@click.argument("text")
@click.pass_context
def set_template(ctx, text: str):
    """Replace the template with TEXT.

    Example:
        shoptab template set 'Hi {name}, you owe ${amount}'
    """
    service = TemplateService(ctx.obj["db"])
    try:
        service.set_template(text)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("Template updated. Preview:")
    click.echo(service.preview())


@template_group.command("reset")
@click.pass_context
def reset_template(ctx):
    """Restore the default template."""
    service = TemplateService(ctx.obj["db"])
    service.reset_template()
    click.echo("Template reset to default.")


@template_group.command("preview")
@click.pass_context
def preview_template(ctx):
    """Render the template for a sample customer."""
    service = TemplateService(ctx.obj["db"])
    click.echo(service.preview())


def register_commands(cli):
    """Register template commands with main CLI."""
    cli.add_command(template_group, name="template")
