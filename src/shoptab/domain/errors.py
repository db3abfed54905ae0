"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested customer does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as a duplicate phone number."""


class ImportFormatError(DomainError):
    """Backup document is not a JSON array of customer records."""


class DeliveryError(DomainError):
    """Reminder could not be handed off to the messaging surface."""


def customer_not_found(customer: str) -> str:
    """Return message for missing customer."""
    return f"Customer '{customer}' not found"


def duplicate_phone(phone: str) -> str:
    """Return message for a phone number that is already registered."""
    return f"A customer with phone number '{phone}' already exists"


def missing_required_fields(fields: list[str]) -> str:
    """Return message for an add request with empty required fields."""
    return f"Please fill in {', '.join(fields)}"
