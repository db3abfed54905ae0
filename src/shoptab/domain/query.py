"""Customer search filtering."""

from typing import Optional, Sequence

from shoptab.domain.entities import Customer


def filter_customers(customers: Sequence[Customer], term: Optional[str]) -> list[Customer]:
    """Filter customers by name or phone.

    Names match case-insensitively; phone numbers match as a plain substring.
    Original order is preserved.

    Args:
        customers: Customers to filter
        term: Search term. Empty or None returns every customer.

    Returns:
        List of matching customers
    """
    if not term:
        return list(customers)

    needle = term.lower()
    return [
        customer
        for customer in customers
        if needle in customer.name.lower() or term in customer.phone
    ]
