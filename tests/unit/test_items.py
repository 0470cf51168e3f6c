"""
Unit tests for the Item dataclass and date boundary helpers.
"""

from datetime import date, datetime

import pytest

from timelane.core.dates import (
    add_days,
    days_between,
    end_of_month,
    format_iso_date,
    next_month,
    parse_iso_date,
    start_of_month,
)
from timelane.core.errors import InvalidDateFormat, InvalidInterval, TimelineError
from timelane.core.items import Item


class TestParseIsoDate:
    """Tests for parsing boundary date strings."""

    def test_parses_zero_padded_date(self):
        assert parse_iso_date("2024-03-09") == date(2024, 3, 9)

    def test_passes_date_through(self):
        value = date(2024, 3, 9)
        assert parse_iso_date(value) is value

    def test_datetime_is_truncated_to_date(self):
        assert parse_iso_date(datetime(2024, 3, 9, 15, 30)) == date(2024, 3, 9)

    @pytest.mark.parametrize(
        "value", ["2024-3-9", "03/09/2024", "2024-03-09T00:00", "", None, 20240309]
    )
    def test_rejects_non_iso_values(self, value):
        """Anything but a zero-padded YYYY-MM-DD string is refused."""
        with pytest.raises(InvalidDateFormat):
            parse_iso_date(value)

    def test_rejects_nonexistent_day(self):
        with pytest.raises(InvalidDateFormat):
            parse_iso_date("2023-02-29")

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_iso_date("tomorrow")


class TestDateHelpers:
    """Tests for calendar arithmetic helpers."""

    def test_format_round_trips_through_parse(self):
        assert format_iso_date(parse_iso_date("2024-12-31")) == "2024-12-31"

    def test_add_days_crosses_month(self):
        assert add_days(date(2024, 1, 30), 3) == date(2024, 2, 2)

    def test_days_between_is_signed(self):
        assert days_between(date(2024, 1, 10), date(2024, 1, 5)) == -5

    def test_month_bounds_leap_year(self):
        assert start_of_month(date(2024, 2, 17)) == date(2024, 2, 1)
        assert end_of_month(date(2024, 2, 17)) == date(2024, 2, 29)
        assert end_of_month(date(2023, 2, 17)) == date(2023, 2, 28)

    def test_next_month_wraps_year(self):
        assert next_month(date(2024, 12, 15)) == date(2025, 1, 1)
        assert next_month(date(2024, 1, 31)) == date(2024, 2, 1)


class TestItem:
    """Tests for the Item dataclass."""

    def test_string_dates_are_parsed(self):
        item = Item(id=1, name="A", start="2024-01-01", end="2024-01-05")
        assert item.start == date(2024, 1, 1)
        assert item.end == date(2024, 1, 5)

    def test_zero_duration_item_occupies_one_day(self):
        item = Item(id=1, name="Kickoff", start="2024-01-01", end="2024-01-01")
        assert item.duration_days == 1

    def test_validate_rejects_inverted_interval(self):
        item = Item(id=1, name="A", start="2024-01-05", end="2024-01-01")
        with pytest.raises(InvalidInterval):
            item.validate()

    def test_validate_returns_self(self):
        item = Item(id=1, name="A", start="2024-01-01", end="2024-01-05")
        assert item.validate() is item

    def test_invalid_interval_is_timeline_error(self):
        assert issubclass(InvalidInterval, TimelineError)

    def test_overlap_is_inclusive(self):
        """Items touching on a single day overlap."""
        a = Item(id=1, name="A", start="2024-01-01", end="2024-01-05")
        b = Item(id=2, name="B", start="2024-01-05", end="2024-01-09")
        c = Item(id=3, name="C", start="2024-01-06", end="2024-01-09")
        assert a.overlaps(b)
        assert b.overlaps(a)
        assert not a.overlaps(c)

    def test_to_dict_uses_iso_strings(self):
        item = Item(id="x", name="A", start="2024-01-01", end="2024-01-05")
        assert item.to_dict() == {
            "id": "x",
            "name": "A",
            "start": "2024-01-01",
            "end": "2024-01-05",
        }

    def test_to_dict_includes_description_when_set(self):
        item = Item(
            id=1, name="A", start="2024-01-01", end="2024-01-05", description="Notes"
        )
        assert item.to_dict()["description"] == "Notes"

    def test_from_dict(self):
        item = Item.from_dict(
            {"id": 7, "name": "Review", "start": "2024-02-01", "end": "2024-02-03"}
        )
        assert item.id == 7
        assert item.end == date(2024, 2, 3)
        assert item.description == ""

    def test_from_dict_missing_key(self):
        with pytest.raises(KeyError):
            Item.from_dict({"id": 1, "name": "A", "start": "2024-01-01"})
