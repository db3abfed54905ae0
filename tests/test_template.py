"""Tests for reminder template rendering and storage."""

import pytest
from decimal import Decimal

from shoptab.domain.entities import Customer
from shoptab.domain.errors import ValidationError
from shoptab.domain.template import DEFAULT_TEMPLATE, format_amount, render


def _customer(name: str = "John Doe", amount: str = "100") -> Customer:
    return Customer(id="c1", name=name, phone="5551234", outstanding_amount=Decimal(amount))


class TestRender:
    """Tests for the render function."""

    def test_render_basic(self):
        """Test both placeholders are substituted."""
        result = render("Hi {name}, you owe ${amount}", _customer())
        assert result == "Hi John Doe, you owe $100.00"

    def test_render_default_template(self):
        """Test the built-in template renders."""
        result = render(DEFAULT_TEMPLATE, _customer(amount="42.5"))
        assert result.startswith("Hi John Doe, this is a reminder")
        assert "$42.50 at our shop" in result

    def test_only_first_occurrence_replaced(self):
        """Test later placeholders are left verbatim."""
        result = render("{name} {name} owes {amount} / {amount}", _customer())
        assert result == "John Doe {name} owes 100.00 / {amount}"

    def test_placeholders_in_any_order(self):
        """Test amount may come before name."""
        result = render("${amount} due from {name}", _customer())
        assert result == "$100.00 due from John Doe"

    def test_missing_placeholders(self):
        """Test templates without placeholders are returned unchanged."""
        assert render("Please pay soon", _customer()) == "Please pay soon"

    def test_no_recursive_substitution(self):
        """Test substituted names are not scanned for placeholders."""
        result = render("{name}: {amount}", _customer(name="{amount}"))
        assert result == "{amount}: 100.00"

    def test_no_escaping(self):
        """Test special characters are inserted as-is."""
        result = render("<{name}>", _customer(name="O'Brien & <Sons>"))
        assert result == "<O'Brien & <Sons>>"

    def test_negative_balance(self):
        """Test credit balances render with a minus sign."""
        assert render("{amount}", _customer(amount="-20")) == "-20.00"


@pytest.mark.parametrize(
    "amount,expected",
    [
        ("100", "100.00"),
        ("0", "0.00"),
        ("12.345", "12.35"),
        ("12.344", "12.34"),
        ("0.005", "0.01"),
        ("1234567.8", "1234567.80"),
    ],
)
def test_format_amount(amount, expected):
    """Test amounts are rounded half up to two decimals."""
    assert format_amount(Decimal(amount)) == expected


class TestTemplateService:
    """Tests for template persistence."""

    def test_default_when_unset(self, template_service):
        """Test the default template is returned when none is saved."""
        assert template_service.get_template() == DEFAULT_TEMPLATE

    def test_set_template(self, template_service, temp_db):
        """Test a saved template is returned and persisted."""
        template_service.set_template("Pay up, {name}")
        assert template_service.get_template() == "Pay up, {name}"
        assert temp_db.get_value("reminderTemplate") == "Pay up, {name}"

    def test_set_empty_template(self, template_service):
        """Test an empty template is rejected."""
        with pytest.raises(ValidationError):
            template_service.set_template("   ")
        assert template_service.get_template() == DEFAULT_TEMPLATE

    def test_reset_template(self, template_service):
        """Test resetting restores the default."""
        template_service.set_template("Custom {name}")
        template_service.reset_template()
        assert template_service.get_template() == DEFAULT_TEMPLATE

    def test_preview(self, template_service):
        """Test preview renders a sample customer."""
        template_service.set_template("Hi {name}, you owe ${amount}")
        assert template_service.preview() == "Hi John Doe, you owe $100.00"

    def test_render_for(self, template_service, sample_customer):
        """Test rendering the saved template for a real customer."""
        template_service.set_template("{name}/{amount}")
        assert template_service.render_for(sample_customer) == "John Doe/100.00"
