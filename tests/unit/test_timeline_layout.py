"""
Unit tests for TimelineLayout.
"""

from datetime import date

import pytest

from timelane.core.config import TimelineConfig
from timelane.core.errors import InvalidRange
from timelane.core.item_store import ItemStore
from timelane.core.layout import TimelineLayout


class TestTimelineLayout:
    """Tests for the derived layout."""

    def test_initial_layout(self, sample_items):
        layout = TimelineLayout(ItemStore(sample_items))

        assert not layout.is_empty
        assert layout.date_range.start == date(2024, 1, 1)
        assert layout.date_range.end == date(2024, 1, 31)
        assert [[i.id for i in lane] for lane in layout.lanes] == [[1, 3], [2]]
        assert layout.lane_of(2) == 1

    def test_empty_store(self):
        layout = TimelineLayout(ItemStore())

        assert layout.is_empty
        assert layout.lanes == []
        with pytest.raises(InvalidRange):
            layout.require_mapper()

    def test_recomputes_on_store_update(self, sample_items):
        store = ItemStore(sample_items)
        layout = TimelineLayout(store)

        # Move B clear of A: everything fits in one lane
        store.update(2, start=date(2024, 1, 11), end=date(2024, 1, 12))

        assert layout.assignment.lane_count == 1

    def test_range_grows_with_items(self, sample_items):
        store = ItemStore(sample_items)
        layout = TimelineLayout(store)

        store.update(3, end=date(2024, 2, 3))

        assert layout.date_range.end == date(2024, 2, 29)
        assert len(layout.date_range.months) == 2

    def test_listeners_run_after_recompute(self, sample_items):
        store = ItemStore(sample_items)
        layout = TimelineLayout(store)
        seen = []
        layout.subscribe(lambda lay: seen.append(lay.assignment.lane_count))

        store.update(2, start=date(2024, 1, 11), end=date(2024, 1, 12))

        assert seen == [1]

    def test_geometry_uses_config_floor(self, sample_items):
        config = TimelineConfig(min_width_fraction=0.5)
        layout = TimelineLayout(ItemStore(sample_items), config)

        assert layout.geometry(1).width_fraction == pytest.approx(0.5)

    def test_vertical_metrics(self, sample_items):
        config = TimelineConfig(header_height=40, lane_spacing=60, content_padding=20)
        layout = TimelineLayout(ItemStore(sample_items), config)

        assert layout.lane_top(0) == 40
        assert layout.lane_top(1) == 100
        assert layout.content_height() == 40 + 2 * 60 + 20

    def test_close_detaches_from_store(self, sample_items):
        store = ItemStore(sample_items)
        layout = TimelineLayout(store)
        layout.close()

        store.update(2, start=date(2024, 1, 11), end=date(2024, 1, 12))

        assert layout.assignment.lane_count == 2
