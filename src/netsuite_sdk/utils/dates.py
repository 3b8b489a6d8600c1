"""NetSuite date helpers."""

from datetime import date, datetime


def format_netsuite_date(value: date | datetime) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_netsuite_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` or ``MM/DD/YYYY`` into a date.

    Raises:
        ValueError: If the string matches neither format.
    """
    value = value.strip()
    if "/" in value:
        return datetime.strptime(value, "%m/%d/%Y").date()
    return datetime.strptime(value, "%Y-%m-%d").date()
