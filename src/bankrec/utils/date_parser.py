"""Date parsing utilities."""

from datetime import date, datetime
from typing import Optional
from dateutil import parser as date_parser

# Explicit statement date layouts and whether the day comes first
DATE_FORMATS = {
    "DD/MM/YYYY": True,
    "MM/DD/YYYY": False,
    "YYYY-MM-DD": False,
}

# Two defaults that differ in every field; a free-form date that parses
# differently under each is missing its year, month or day
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_date(date_str: str, date_format: Optional[str] = None) -> date:
    """Parse a statement date string into a date object.

    Supports:
    - Explicit layouts: "DD/MM/YYYY", "MM/DD/YYYY", "YYYY-MM-DD"
    - Free-form dates when no layout is given: "2024-01-15", "Jan 15, 2024", etc.

    Args:
        date_str: Date string as it appears in the statement
        date_format: Optional layout name from DATE_FORMATS

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed or the layout is unknown
    """
    if date_str is None:
        raise ValueError("Empty date string")
    cleaned = date_str.replace('"', "").replace("'", "").strip()
    if not cleaned:
        raise ValueError("Empty date string")

    if date_format is not None and date_format not in DATE_FORMATS:
        raise ValueError(
            f"Unknown date format '{date_format}'. Supported formats: {', '.join(DATE_FORMATS)}"
        )

    if date_format is not None and date_format != "YYYY-MM-DD":
        parts = cleaned.split("/")
        if len(parts) != 3:
            raise ValueError(f"Invalid date format: {cleaned}")
        try:
            first, second, year = (int(part) for part in parts)
            if DATE_FORMATS[date_format]:
                return date(year, second, first)
            return date(year, first, second)
        except ValueError:
            raise ValueError(f"Invalid date format: {cleaned}")

    try:
        first, second = (date_parser.parse(cleaned, default=d) for d in _DEFAULTS)
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{cleaned}': {e}")
    if first != second:
        raise ValueError(f"Incomplete date '{cleaned}': year, month and day are required")
    return first.date()


def is_valid_date(date_str: Optional[str]) -> bool:
    """Return True if the string parses to a calendar date."""
    if not date_str:
        return False
    try:
        parse_date(date_str)
    except ValueError:
        return False
    return True
