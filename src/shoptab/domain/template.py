"""Reminder template rendering and storage."""

import logging
import re
from decimal import Decimal, ROUND_HALF_UP

from shoptab.database.base import KeyValueStore
from shoptab.domain.entities import Customer
from shoptab.domain.errors import ValidationError

logger = logging.getLogger(__name__)

TEMPLATE_KEY = "reminderTemplate"

DEFAULT_TEMPLATE = (
    "Hi {name}, this is a reminder that you have an outstanding balance of "
    "${amount} at our shop. Please settle your account soon. Thank you!"
)

PREVIEW_CUSTOMER = Customer(
    id="preview",
    name="John Doe",
    phone="",
    outstanding_amount=Decimal("100"),
)

_PLACEHOLDER = re.compile(r"\{(name|amount)\}")


def format_amount(amount: Decimal) -> str:
    """Format an amount with exactly two decimals, rounding half up."""
    return str(Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def render(template: str, customer: Customer) -> str:
    """Render a reminder message for a customer.

    Only the first ``{name}`` and the first ``{amount}`` are substituted;
    later occurrences stay in the output verbatim. Substituted text is not
    scanned again, so a name containing ``{amount}`` is left alone.

    Args:
        template: Template string
        customer: Customer whose name and balance are inserted

    Returns:
        Rendered message
    """
    values = {
        "name": customer.name,
        "amount": format_amount(customer.outstanding_amount),
    }
    seen: set[str] = set()

    def substitute(match: re.Match) -> str:
        placeholder = match.group(1)
        if placeholder in seen:
            return match.group(0)
        seen.add(placeholder)
        return values[placeholder]

    return _PLACEHOLDER.sub(substitute, template)


class TemplateService:
    """Service for reading and updating the reminder template."""

    def __init__(self, db: KeyValueStore):
        """Initialize template service.

        Args:
            db: KeyValueStore instance
        """
        self.db = db

    def get_template(self) -> str:
        """Return the saved template, or the default when none is saved."""
        saved = self.db.get_value(TEMPLATE_KEY)
        return saved if saved else DEFAULT_TEMPLATE

    def set_template(self, template: str) -> None:
        """Save a new template.

        Raises:
            ValidationError: If the template is empty
        """
        if not template or not template.strip():
            raise ValidationError("Reminder template must not be empty")
        self.db.set_value(TEMPLATE_KEY, template)
        logger.info("Updated reminder template")

    def reset_template(self) -> None:
        """Discard the saved template so the default applies again."""
        self.db.delete_value(TEMPLATE_KEY)
        logger.info("Reset reminder template to default")

    def preview(self) -> str:
        """Render the current template for a sample customer."""
        return render(self.get_template(), PREVIEW_CUSTOMER)

    def render_for(self, customer: Customer) -> str:
        """Render the current template for a customer."""
        return render(self.get_template(), customer)
