"""Utility for resolving customer references to IDs."""

from shoptab.domain.errors import NotFoundError, ValidationError, customer_not_found
from shoptab.domain.ledger import LedgerService


def resolve_customer(ledger: LedgerService, reference: str) -> str:
    """Resolve a customer ID, phone number or ID prefix to a customer ID.

    Args:
        ledger: LedgerService instance
        reference: Full ID, exact phone number, or unambiguous ID prefix

    Returns:
        Customer ID

    Raises:
        NotFoundError: If nothing matches
        ValidationError: If an ID prefix matches more than one customer
    """
    reference = reference.strip()
    if not reference:
        raise NotFoundError(customer_not_found(reference))

    if ledger.get_customer(reference) is not None:
        return reference

    customers = ledger.list_customers()
    for customer in customers:
        if customer.phone == reference:
            return customer.id

    matches = [c for c in customers if c.id.startswith(reference)]
    if len(matches) == 1:
        return matches[0].id
    if len(matches) > 1:
        raise ValidationError(
            f"Customer reference '{reference}' is ambiguous ({len(matches)} matches)"
        )

    raise NotFoundError(customer_not_found(reference))
