"""
Date Range Module.

Computes the month-aligned span of dates a timeline must cover, plus the
month boundaries inside it used for header and grid rendering.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Tuple

from timelane.core.dates import end_of_month, next_month, start_of_month
from timelane.core.errors import InvalidRange
from timelane.core.items import Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthSpan:
    """
    One calendar month clipped to a DateRange.

    Attributes:
        start: First day of the month.
        end: Last day of the month.
        days: Number of days in the span, counting both ends.
    """

    start: date
    end: date
    days: int


@dataclass(frozen=True)
class DateRange:
    """
    Month-aligned inclusive span of dates.

    Attributes:
        start: First day of the earliest month.
        end: Last day of the latest month.
        months: First day of every month in the span, ascending.
    """

    start: date
    end: date
    months: Tuple[date, ...]

    @property
    def total_days(self) -> int:
        """Number of days in the range, counting both ends."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def month_segments(self) -> List[MonthSpan]:
        """
        Splits the range into its months.

        Returns:
            List[MonthSpan]: One span per entry in ``months``; the day counts
                sum to ``total_days``.
        """
        segments = []
        for month_start in self.months:
            month_end = min(end_of_month(month_start), self.end)
            segments.append(
                MonthSpan(
                    start=month_start,
                    end=month_end,
                    days=(month_end - month_start).days + 1,
                )
            )
        return segments


def month_boundaries(start: date, end: date) -> Tuple[date, ...]:
    """
    Enumerates the first day of each month from ``start`` through ``end``.

    Args:
        start: Any day; rounded down to its month.
        end: Any day; its month is included.

    Returns:
        Tuple[date, ...]: Month starts in ascending order.
    """
    months = []
    current = start_of_month(start)
    while current <= end:
        months.append(current)
        current = next_month(current)
    return tuple(months)


def compute_date_range(items: Iterable[Item]) -> DateRange:
    """
    Computes the month-aligned range covering every item.

    The minimum start is rounded down to the first of its month and the
    maximum end up to the last of its month.

    Args:
        items: Non-empty collection of items.

    Returns:
        DateRange: The covering range.

    Raises:
        InvalidRange: If ``items`` is empty. Callers render an empty state
            instead of asking for a range.
    """
    items = list(items)
    if not items:
        raise InvalidRange("Cannot compute a date range for an empty item set")

    earliest = min(item.start for item in items)
    latest = max(item.end for item in items)

    start = start_of_month(earliest)
    end = end_of_month(latest)
    date_range = DateRange(start=start, end=end, months=month_boundaries(start, end))

    logger.debug(
        f"Date range for {len(items)} items: {start} - {end} "
        f"({len(date_range.months)} months)"
    )
    return date_range
