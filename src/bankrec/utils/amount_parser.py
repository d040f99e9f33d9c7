"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from bankrec.domain.entities import CREDIT, DEBIT


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a signed Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace and stray quotes
    amount_str = amount_str.strip().strip("\"'")

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas and inner whitespace
    amount_str = re.sub(r"[,\s]", "", amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount_str}")
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {amount_str}")
    if is_negative:
        amount = -amount
    return amount


def split_amount(amount_str: str) -> tuple[Decimal, str]:
    """Split a signed amount string into a magnitude and a transaction type.

    Negative and parenthesised amounts are debits, everything else is a credit.

    Returns:
        Tuple of (positive magnitude, "debit" or "credit")

    Raises:
        ValueError: If amount string cannot be parsed
    """
    amount = parse_amount(amount_str)
    if amount < 0:
        return -amount, DEBIT
    return amount, CREDIT
