"""Tests for domain entities."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from shoptab.domain.entities import Customer, Transaction, TransactionType


def _txn(day: int, amount: str) -> Transaction:
    return Transaction(
        date=datetime(2024, 1, day, tzinfo=UTC),
        amount=Decimal(amount),
        type=TransactionType.CREDIT if Decimal(amount) > 0 else TransactionType.PAYMENT,
        note="",
    )


class TestCustomer:
    """Tests for Customer entity."""

    def test_defaults(self):
        """Test optional fields default to empty."""
        customer = Customer(id="c1", name="A", phone="1", outstanding_amount=Decimal("0"))
        assert customer.address is None
        assert customer.notes is None
        assert customer.last_purchase_date is None
        assert customer.transactions == ()
        assert customer.last_activity is None
        assert customer.history() == []

    def test_immutability(self):
        """Test that Customer entities are immutable."""
        customer = Customer(id="c1", name="A", phone="1", outstanding_amount=Decimal("0"))
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            customer.name = "B"

    def test_last_activity_and_history(self):
        """Test history is newest first and last activity is the newest date."""
        transactions = (_txn(1, "100"), _txn(5, "-20"), _txn(9, "15"))
        customer = Customer(
            id="c1",
            name="A",
            phone="1",
            outstanding_amount=Decimal("95"),
            transactions=transactions,
        )

        assert customer.last_activity == datetime(2024, 1, 9, tzinfo=UTC)
        assert customer.history() == list(reversed(transactions))

    def test_equality(self):
        """Test Customer entity equality."""
        a = Customer(id="c1", name="A", phone="1", outstanding_amount=Decimal("1"))
        b = Customer(id="c1", name="A", phone="1", outstanding_amount=Decimal("1.00"))
        c = Customer(id="c2", name="A", phone="1", outstanding_amount=Decimal("1"))
        assert a == b
        assert a != c


def test_transaction_type_values():
    """Test transaction types serialize to their stored names."""
    assert TransactionType.CREDIT.value == "credit"
    assert TransactionType.PAYMENT.value == "payment"
    assert TransactionType("payment") is TransactionType.PAYMENT
