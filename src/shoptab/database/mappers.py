"""Mapper functions to convert between domain entities and JSON records.

The same record shape is used for the persisted customer blob and for backup
files, so both paths go through these functions. Records written by older
versions of the app (camelCase keys, JavaScript timestamps ending in 'Z')
are accepted as-is.

Amounts stay Decimal in the records; callers serialize them with
simplejson's use_decimal so no float rounding happens on disk.
"""

import uuid
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dateutil import parser as date_parser

from shoptab.domain import entities as domain
from shoptab.domain.errors import ImportFormatError


def _number_to_decimal(value: Any, field_name: str) -> Decimal:
    """Convert a JSON number (or numeric string) to Decimal."""
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, bool):
        raise ImportFormatError(f"Invalid {field_name}: {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ImportFormatError(f"Invalid {field_name}: {value!r}")
    if not amount.is_finite():
        raise ImportFormatError(f"Invalid {field_name}: {value!r}")
    return amount


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    try:
        return date_parser.isoparse(str(value))
    except (ValueError, TypeError, OverflowError) as e:
        raise ImportFormatError(f"Invalid transaction date {value!r}: {e}")


def _parse_day(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        return date_parser.isoparse(str(value)).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ImportFormatError(f"Invalid lastPurchaseDate {value!r}: {e}")


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def transaction_to_record(transaction: domain.Transaction) -> dict[str, Any]:
    """Convert domain Transaction entity to a JSON record."""
    return {
        "date": transaction.date.isoformat() if transaction.date else None,
        "amount": transaction.amount,
        "type": transaction.type.value,
        "note": transaction.note,
    }


def transaction_from_record(record: Any) -> domain.Transaction:
    """Convert a JSON record to a domain Transaction entity.

    Unknown or missing types are inferred from the sign of the amount.
    """
    if not isinstance(record, dict):
        raise ImportFormatError(f"Transaction entry must be an object, got {type(record).__name__}")

    amount = _number_to_decimal(record.get("amount"), "transaction amount")
    try:
        txn_type = domain.TransactionType(record.get("type"))
    except ValueError:
        txn_type = domain.TransactionType.CREDIT if amount > 0 else domain.TransactionType.PAYMENT

    return domain.Transaction(
        date=_parse_timestamp(record.get("date")),
        amount=amount,
        type=txn_type,
        note=str(record.get("note") or ""),
    )


def customer_to_record(customer: domain.Customer) -> dict[str, Any]:
    """Convert domain Customer entity to a JSON record."""
    return {
        "id": customer.id,
        "name": customer.name,
        "phone": customer.phone,
        "address": customer.address or "",
        "notes": customer.notes or "",
        "outstandingAmount": customer.outstanding_amount,
        "lastPurchaseDate": (
            customer.last_purchase_date.isoformat() if customer.last_purchase_date else None
        ),
        "transactions": [transaction_to_record(txn) for txn in customer.transactions],
    }


def customer_from_record(record: Any) -> domain.Customer:
    """Convert a JSON record to a domain Customer entity.

    Missing keys fall back to empty values; records without an id get a
    freshly generated one so they stay addressable.
    """
    if not isinstance(record, dict):
        raise ImportFormatError(f"Customer entry must be an object, got {type(record).__name__}")

    transactions = record.get("transactions") or []
    if not isinstance(transactions, list):
        raise ImportFormatError("Customer transactions must be an array")

    customer_id = record.get("id")
    return domain.Customer(
        id=str(customer_id) if customer_id not in (None, "") else uuid.uuid4().hex,
        name=str(record.get("name") or ""),
        phone=str(record.get("phone") or ""),
        outstanding_amount=_number_to_decimal(record.get("outstandingAmount"), "outstandingAmount"),
        address=_optional_text(record.get("address")),
        notes=_optional_text(record.get("notes")),
        last_purchase_date=_parse_day(record.get("lastPurchaseDate")),
        transactions=tuple(transaction_from_record(txn) for txn in transactions),
    )
