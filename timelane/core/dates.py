"""
Date Boundary Module.

Parsing and formatting of calendar dates at the core boundary. Dates cross
the boundary only as zero-padded ISO ``YYYY-MM-DD`` strings; inside the core
they are ``datetime.date`` values and never carry locale formatting.
"""

import calendar
import re
from datetime import date, datetime, timedelta

from timelane.core.errors import InvalidDateFormat

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value) -> date:
    """
    Parses an ISO ``YYYY-MM-DD`` string into a date.

    ``date`` instances are passed through unchanged so callers may hand
    already-parsed values to the core.

    Args:
        value: The string (or date) to parse.

    Returns:
        date: The parsed calendar date.

    Raises:
        InvalidDateFormat: If the value is not a zero-padded ISO date or
            names a day that does not exist.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        raise InvalidDateFormat(f"Expected YYYY-MM-DD date, got {value!r}")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateFormat(f"Invalid calendar date {value!r}: {e}") from e


def format_iso_date(value: date) -> str:
    """Formats a date as ``YYYY-MM-DD``."""
    return value.isoformat()


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Returns the signed number of days from ``start`` to ``end``."""
    return (end - start).days


def start_of_month(value: date) -> date:
    return value.replace(day=1)


def end_of_month(value: date) -> date:
    last_day = calendar.monthrange(value.year, value.month)[1]
    return value.replace(day=last_day)


def next_month(value: date) -> date:
    """Returns the first day of the month after ``value``."""
    if value.month == 12:
        return date(value.year + 1, 1, 1)
    return date(value.year, value.month + 1, 1)
