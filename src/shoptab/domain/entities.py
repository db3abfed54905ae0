"""Domain model entities for shoptab.

These are pure data classes representing the customer ledger, independent of
how the collection is persisted. Mutations produce new instances through the
ledger service rather than changing records in place.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Kind of balance-changing event."""

    CREDIT = "credit"
    PAYMENT = "payment"


@dataclass(frozen=True)
class Transaction:
    """One signed balance change in a customer's history.

    Imported records may lack a timestamp, in which case date is None.
    """

    date: Optional[datetime]
    amount: Decimal
    type: TransactionType
    note: str


@dataclass(frozen=True)
class Customer:
    """Customer tab with its running balance and transaction log."""

    id: str
    name: str
    phone: str
    outstanding_amount: Decimal
    address: Optional[str] = None
    notes: Optional[str] = None
    last_purchase_date: Optional[date] = None
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    @property
    def last_activity(self) -> Optional[datetime]:
        """Timestamp of the most recent transaction, if any."""
        if not self.transactions:
            return None
        return self.transactions[-1].date

    def history(self) -> list[Transaction]:
        """Return transactions newest first."""
        return list(reversed(self.transactions))
