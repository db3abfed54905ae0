"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str | int | float | Decimal | None) -> Decimal:
    """Parse an amount into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Numbers are accepted directly.

    Args:
        amount_str: Amount string or number

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount is empty or cannot be parsed
    """
    if isinstance(amount_str, Decimal):
        return amount_str
    if isinstance(amount_str, (int, float)) and not isinstance(amount_str, bool):
        return Decimal(str(amount_str))

    if amount_str is None or not str(amount_str).strip():
        raise ValueError("Empty amount string")

    amount_str = str(amount_str).strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # "-$12" keeps its sign once the currency symbol is gone
    amount_str = re.sub(r"[$€£¥₹]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount
