"""
Geometry Mapper Module.

Converts item dates into horizontal placement expressed as fractions of the
total timeline width, and pointer pixel deltas back into whole-day deltas.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple

from timelane.app.constants import MIN_WIDTH_FRACTION
from timelane.core.date_range import DateRange, MonthSpan
from timelane.core.items import Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemGeometry:
    """
    Horizontal placement relative to the full range width.

    Attributes:
        offset_fraction: Left edge, 0.0 at the range start.
        width_fraction: Width, 1.0 for the full range.
    """

    offset_fraction: float
    width_fraction: float

    @property
    def end_fraction(self) -> float:
        return self.offset_fraction + self.width_fraction

    def as_percentages(self) -> Tuple[float, float]:
        """Returns ``(left %, width %)``."""
        return self.offset_fraction * 100.0, self.width_fraction * 100.0


def round_half_up(value: float) -> int:
    """Rounds to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


class GeometryMapper:
    """
    Maps dates onto a DateRange.

    Positions are fractions of the range, so the same geometry serves any
    track width or zoom level; callers multiply by the rendered track width.
    """

    def __init__(
        self, date_range: DateRange, min_width_fraction: float = MIN_WIDTH_FRACTION
    ):
        """
        Initializes the GeometryMapper.

        Args:
            date_range: The range the track covers.
            min_width_fraction: Cosmetic floor for bar widths.
        """
        self.date_range = date_range
        self.min_width_fraction = min_width_fraction

    @property
    def total_days(self) -> int:
        return self.date_range.total_days

    def raw_geometry(self, start: date, end: date) -> ItemGeometry:
        """
        Computes placement for a date pair without the minimum-width floor.

        Args:
            start: First day, inclusive.
            end: Last day, inclusive.

        Returns:
            ItemGeometry: Exact fractions of the range.
        """
        total_days = self.total_days
        offset_days = (start - self.date_range.start).days
        duration_days = (end - start).days + 1
        return ItemGeometry(
            offset_fraction=offset_days / total_days,
            width_fraction=duration_days / total_days,
        )

    def geometry(self, item: Item) -> ItemGeometry:
        """
        Computes display placement for an item.

        The width is floored to ``min_width_fraction`` so single-day items
        stay visible. The floor only affects rendering.

        Args:
            item: The item to place.

        Returns:
            ItemGeometry: Placement for rendering.
        """
        raw = self.raw_geometry(item.start, item.end)
        return ItemGeometry(
            offset_fraction=raw.offset_fraction,
            width_fraction=max(raw.width_fraction, self.min_width_fraction),
        )

    def month_geometry(self) -> List[Tuple[MonthSpan, ItemGeometry]]:
        """
        Places every month of the range, for headers and grid bands.

        Returns:
            List of (MonthSpan, ItemGeometry) pairs in month order.
        """
        return [
            (span, self.raw_geometry(span.start, span.end))
            for span in self.date_range.month_segments()
        ]

    def days_delta(
        self,
        pixel_delta_x: float,
        track_width_pixels: float,
        total_days: Optional[int] = None,
    ) -> int:
        """
        Converts a horizontal pointer movement into whole days.

        Args:
            pixel_delta_x: Pointer movement since the drag anchor.
            track_width_pixels: Rendered width of the full range.
            total_days: Range width in days; defaults to the current range.
                Drags pass the value captured at pointer-down.

        Returns:
            int: The nearest whole number of days.

        Raises:
            ValueError: If the track width is not positive.
        """
        if track_width_pixels <= 0:
            raise ValueError(f"Track width must be positive, got {track_width_pixels}")
        if total_days is None:
            total_days = self.total_days
        pixels_per_day = track_width_pixels / total_days
        return round_half_up(pixel_delta_x / pixels_per_day)

    @staticmethod
    def to_pixels(geometry: ItemGeometry, track_width: float) -> Tuple[float, float]:
        """
        Scales a geometry to a rendered track.

        Args:
            geometry: Fractional placement.
            track_width: Rendered track width (already zoomed).

        Returns:
            Tuple of (x, width) in pixels.
        """
        return geometry.offset_fraction * track_width, geometry.width_fraction * track_width
