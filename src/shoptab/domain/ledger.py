"""Customer ledger domain service."""

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime, UTC
from decimal import Decimal
from typing import Optional, Sequence

import simplejson

from shoptab.database.base import KeyValueStore
from shoptab.database.mappers import customer_from_record, customer_to_record
from shoptab.domain.entities import Customer, Transaction, TransactionType
from shoptab.domain.errors import (
    ConflictError,
    ImportFormatError,
    ValidationError,
    duplicate_phone,
    missing_required_fields,
)
from shoptab.domain.query import filter_customers
from shoptab.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

CUSTOMERS_KEY = "creditCustomers"

INITIAL_CREDIT_NOTE = "Initial credit"
PURCHASE_NOTE = "Additional purchase"
PAYMENT_NOTE = "Payment received"


class LedgerService:
    """Service owning the customer collection.

    The collection is loaded from the store once, kept in memory, and
    written back as a single blob after every committed mutation.
    """

    def __init__(self, db: KeyValueStore):
        """Initialize ledger service and load the persisted collection.

        Args:
            db: KeyValueStore instance
        """
        self.db = db
        self._customers: list[Customer] = self._load()

    def _load(self) -> list[Customer]:
        raw = self.db.get_value(CUSTOMERS_KEY)
        if raw is None:
            return []
        try:
            records = simplejson.loads(raw, use_decimal=True)
        except simplejson.JSONDecodeError as e:
            raise ImportFormatError(f"Stored customer data is not valid JSON: {e}")
        if not isinstance(records, list):
            raise ImportFormatError("Stored customer data is not a JSON array")
        customers = [customer_from_record(record) for record in records]
        logger.debug(f"Loaded {len(customers)} customers")
        return customers

    def _commit(self, customers: list[Customer]) -> None:
        # In-memory state only changes once the store accepted the write
        records = [customer_to_record(c) for c in customers]
        self.db.set_value(CUSTOMERS_KEY, simplejson.dumps(records, use_decimal=True))
        self._customers = customers

    def list_customers(self) -> list[Customer]:
        """List all customers in insertion order.

        Returns:
            List of customer entities
        """
        return list(self._customers)

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID.

        Args:
            customer_id: Customer ID

        Returns:
            Customer entity or None if not found
        """
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def search_customers(self, term: Optional[str]) -> list[Customer]:
        """Filter customers by name (case-insensitive) or phone."""
        return filter_customers(self._customers, term)

    def total_outstanding(self) -> Decimal:
        """Sum of all customer balances."""
        return sum((c.outstanding_amount for c in self._customers), Decimal("0"))

    def add_customer(
        self,
        name: str,
        phone: str,
        outstanding_amount: str | Decimal | None,
        address: Optional[str] = None,
        notes: Optional[str] = None,
        last_purchase_date: Optional[date] = None,
    ) -> Customer:
        """Add a new customer with an initial credit.

        Args:
            name: Customer name
            phone: Phone number, unique across customers
            outstanding_amount: Opening balance, must be non-negative
            address: Optional address
            notes: Optional notes
            last_purchase_date: Date of last purchase (defaults to today)

        Returns:
            The created customer

        Raises:
            ValidationError: If a required field is empty or the amount is invalid
            ConflictError: If the phone number is already registered
        """
        name = (name or "").strip()
        phone = (phone or "").strip()
        missing = []
        if not name:
            missing.append("name")
        if not phone:
            missing.append("phone")
        if outstanding_amount is None or str(outstanding_amount).strip() == "":
            missing.append("amount")
        if missing:
            raise ValidationError(missing_required_fields(missing))

        try:
            amount = parse_amount(outstanding_amount)
        except ValueError as e:
            raise ValidationError(f"Invalid amount: {e}")
        if amount < 0:
            raise ValidationError("Amount must not be negative")

        if any(c.phone == phone for c in self._customers):
            raise ConflictError(duplicate_phone(phone))

        customer = Customer(
            id=uuid.uuid4().hex,
            name=name,
            phone=phone,
            outstanding_amount=amount,
            address=address or None,
            notes=notes or None,
            last_purchase_date=last_purchase_date or date.today(),
            transactions=(
                Transaction(
                    date=datetime.now(UTC),
                    amount=amount,
                    type=TransactionType.CREDIT,
                    note=INITIAL_CREDIT_NOTE,
                ),
            ),
        )
        self._commit([*self._customers, customer])
        logger.info(f"Added customer {customer.id} ({customer.name}) with balance {amount}")
        return customer

    def adjust_balance(
        self, customer_id: str, delta: str | Decimal | None
    ) -> Optional[Customer]:
        """Record a purchase (positive delta) or payment (zero or negative delta).

        Args:
            customer_id: Customer ID
            delta: Signed amount to add to the balance

        Returns:
            The updated customer, or None if no customer has this ID

        Raises:
            ValidationError: If delta is empty or cannot be parsed
        """
        if delta is None or str(delta).strip() == "":
            raise ValidationError("Please enter an amount")
        try:
            amount = parse_amount(delta)
        except ValueError as e:
            raise ValidationError(f"Invalid amount: {e}")

        for index, customer in enumerate(self._customers):
            if customer.id != customer_id:
                continue

            is_purchase = amount > 0
            transaction = Transaction(
                date=datetime.now(UTC),
                amount=amount,
                type=TransactionType.CREDIT if is_purchase else TransactionType.PAYMENT,
                note=PURCHASE_NOTE if is_purchase else PAYMENT_NOTE,
            )
            updated = replace(
                customer,
                outstanding_amount=customer.outstanding_amount + amount,
                last_purchase_date=date.today() if is_purchase else customer.last_purchase_date,
                transactions=customer.transactions + (transaction,),
            )
            customers = list(self._customers)
            customers[index] = updated
            self._commit(customers)
            logger.info(
                f"Recorded {transaction.type.value} of {amount} for customer {customer_id}; "
                f"balance now {updated.outstanding_amount}"
            )
            return updated

        logger.debug(f"Adjust ignored: customer {customer_id} not found")
        return None

    def delete_customer(self, customer_id: str) -> bool:
        """Delete a customer.

        Args:
            customer_id: Customer ID to delete

        Returns:
            True if a customer was removed, False if the ID was unknown
        """
        remaining = [c for c in self._customers if c.id != customer_id]
        if len(remaining) == len(self._customers):
            logger.debug(f"Delete ignored: customer {customer_id} not found")
            return False

        self._commit(remaining)
        logger.info(f"Deleted customer {customer_id}")
        return True

    def replace_all(self, customers: Sequence[Customer]) -> None:
        """Replace the whole collection without validating individual records."""
        self._commit(list(customers))
        logger.info(f"Replaced customer collection with {len(self._customers)} records")
