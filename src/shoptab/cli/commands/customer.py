"""Customer management commands."""

import click
from shoptab.cli.customer_resolution import format_money, resolve_customer_or_exit
from shoptab.cli.error_handling import handle_domain_error, load_ledger
from shoptab.domain.entities import TransactionType
from shoptab.domain.errors import DomainError
from shoptab.utils.date_parser import parse_date


@click.group()
def customer_group():
    """Manage customers and their balances."""
    pass


@customer_group.command("add")
@click.option("--name", required=True, help="Customer name")
@click.option("--phone", required=True, help="Phone number (must be unique)")
@click.option("--amount", required=True, help="Amount owed (e.g., 150 or 150.50)")
@click.option("--address", help="Address")
@click.option("--notes", help="Additional notes")
@click.option(
    "--last-purchase",
    help="Last purchase date (YYYY-MM-DD or 'today', 'yesterday'; defaults to today)",
)
@click.pass_context
def add_customer(
    ctx,
    name: str,
    phone: str,
    amount: str,
    address: str | None,
    notes: str | None,
    last_purchase: str | None,
):
    """Add a customer with an opening balance.

    Examples:
        shoptab customer add --name "John Doe" --phone 5551234 --amount 100
        shoptab customer add --name "Jane" --phone 5559876 --amount 42.50 --notes "Pays Fridays"
    """
    ledger = load_ledger(ctx)

    purchase_date = None
    if last_purchase:
        try:
            purchase_date = parse_date(last_purchase)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        customer = ledger.add_customer(
            name=name,
            phone=phone,
            outstanding_amount=amount,
            address=address,
            notes=notes,
            last_purchase_date=purchase_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added customer '{customer.name}' (ID: {customer.id})")
    click.echo(f"  Phone: {customer.phone}")
    click.echo(f"  Balance: {format_money(customer.outstanding_amount)}")


@customer_group.command("list")
@click.option("--search", "-s", help="Filter by name or phone number")
@click.pass_context
def list_customers(ctx, search: str | None):
    """List customers, optionally filtered by name or phone."""
    ledger = load_ledger(ctx)
    customers = ledger.search_customers(search)

    if not customers:
        click.echo("No customers found." if search else "No customers added yet.")
        return

    click.echo(f"\nFound {len(customers)} customer(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<10} {'Name':<25} {'Phone':<16} {'Balance':>12}  {'Last update':<12}")
    click.echo("-" * 90)
    for customer in customers:
        last = customer.last_activity
        last_str = last.date().isoformat() if last else ""
        click.echo(
            f"{customer.id[:8]:<10} {customer.name[:25]:<25} {customer.phone:<16} "
            f"{format_money(customer.outstanding_amount):>12}  {last_str:<12}"
        )
    click.echo("-" * 90)
    if not search:
        click.echo(f"Total outstanding: {format_money(ledger.total_outstanding())}")


@customer_group.command("show")
@click.argument("customer_ref", metavar="CUSTOMER")
@click.pass_context
def show_customer(ctx, customer_ref: str):
    """Show a customer's details and transaction history.

    CUSTOMER can be an ID, an ID prefix, or a phone number.
    """
    ledger = load_ledger(ctx)
    customer = resolve_customer_or_exit(ctx, ledger, customer_ref)

    click.echo(f"\n{customer.name} (ID: {customer.id})")
    click.echo(f"  Phone: {customer.phone}")
    if customer.address:
        click.echo(f"  Address: {customer.address}")
    if customer.notes:
        click.echo(f"  Notes: {customer.notes}")
    click.echo(f"  Balance: {format_money(customer.outstanding_amount)}")
    if customer.last_purchase_date:
        click.echo(f"  Last purchase: {customer.last_purchase_date.isoformat()}")

    click.echo("\nTransaction history:")
    for txn in customer.history():
        sign = "+" if txn.type == TransactionType.CREDIT else "-"
        when = txn.date.date().isoformat() if txn.date else ""
        click.echo(f"  {when:<10}  {txn.note:<22} {sign}${abs(txn.amount):,.2f}")


@customer_group.command("adjust", context_settings={"ignore_unknown_options": True})
@click.argument("customer_ref", metavar="CUSTOMER")
@click.argument("amount")
@click.pass_context
def adjust_balance(ctx, customer_ref: str, amount: str):
    """Record a purchase or a payment.

    AMOUNT is positive for a new purchase on credit and negative for a
    payment received.

    Examples:
        shoptab customer adjust 5551234 50
        shoptab customer adjust 5551234 -30
    """
    ledger = load_ledger(ctx)
    customer = resolve_customer_or_exit(ctx, ledger, customer_ref)

    try:
        updated = ledger.adjust_balance(customer.id, amount)
    except DomainError as e:
        handle_domain_error(ctx, e)

    txn = updated.transactions[-1]
    click.echo(f"{txn.note} for '{updated.name}': {format_money(txn.amount)}")
    click.echo(f"  New balance: {format_money(updated.outstanding_amount)}")


@customer_group.command("delete")
@click.argument("customer_ref", metavar="CUSTOMER")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_customer(ctx, customer_ref: str, yes: bool):
    """Delete a customer and their history.

    CUSTOMER can be an ID, an ID prefix, or a phone number.
    """
    ledger = load_ledger(ctx)
    customer = resolve_customer_or_exit(ctx, ledger, customer_ref)

    if not yes and not click.confirm(
        f"Are you sure you want to delete customer '{customer.name}' (ID: {customer.id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    ledger.delete_customer(customer.id)
    click.echo(f"Deleted customer '{customer.name}'")


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
