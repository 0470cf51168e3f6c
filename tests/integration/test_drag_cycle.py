"""
Integration tests: store, layout and interaction controller working together
over complete gestures.
"""

from datetime import date

import pytest

from timelane.cli.utils import load_items_file
from timelane.core.interaction import InteractionController, TargetRole
from timelane.core.item_store import ItemStore
from timelane.core.layout import TimelineLayout


@pytest.fixture
def session(sample_items_file):
    store = ItemStore(load_items_file(sample_items_file))
    layout = TimelineLayout(store)
    commits = []
    controller = InteractionController(store, layout, on_commit=commits.append)
    return store, layout, controller, commits


def pixels_per_day(layout, track_width):
    return track_width / layout.date_range.total_days


def test_sample_layout(session):
    store, layout, _, _ = session

    assert layout.date_range.start == date(2021, 1, 1)
    assert layout.date_range.end == date(2021, 4, 30)
    for lane in layout.lanes:
        for earlier, later in zip(lane, lane[1:]):
            assert earlier.end < later.start
    assert sorted(layout.assignment.as_mapping()) == sorted(i.id for i in store)


def test_drag_move_relayouts_and_commits(session):
    store, layout, controller, commits = session
    track = 1200.0
    day = pixels_per_day(layout, track)
    lanes_before = layout.assignment.lane_count

    controller.pointer_down(8, 500, TargetRole.ITEM_BODY, track)
    for step in range(1, 6):
        controller.pointer_move(500 + step * day)
    committed = controller.pointer_up()

    assert committed.start == date(2021, 4, 11)
    assert commits == [committed]
    assert layout.date_range.end == date(2021, 4, 30)
    assert layout.assignment.lane_count == lanes_before


def test_drag_past_range_grows_it(session):
    store, layout, controller, _ = session
    track = 1200.0
    day = pixels_per_day(layout, track)

    controller.pointer_down(8, 0, TargetRole.ITEM_BODY, track)
    controller.pointer_move(30 * day)
    controller.pointer_up()

    assert store.get(8).start == date(2021, 5, 6)
    assert layout.date_range.end == date(2021, 5, 31)
    assert len(layout.date_range.months) == 5


def test_resize_creates_overlap_and_new_lane(session):
    store, layout, controller, commits = session
    track = 1200.0
    day = pixels_per_day(layout, track)

    # Stretch the release back over QA
    controller.pointer_down(8, 600, TargetRole.EDGE_START, track)
    controller.pointer_move(600 - 10 * day)
    controller.pointer_up()

    release = store.get(8)
    qa = store.get(7)
    assert release.start == date(2021, 3, 27)
    assert release.overlaps(qa)
    assert layout.lane_of(8) != layout.lane_of(7)
    assert len(commits) == 1


def test_rename_then_move(session):
    store, layout, controller, commits = session

    controller.double_click(4)
    controller.edit_name("Project kickoff")
    controller.key_press("Enter")

    track = 1200.0
    controller.pointer_down(4, 100, TargetRole.ITEM_BODY, track)
    controller.pointer_move(100 - 2 * pixels_per_day(layout, track))
    controller.pointer_up()

    item = store.get(4)
    assert item.name == "Project kickoff"
    assert item.start == item.end == date(2021, 1, 20)
    assert [c.id for c in commits] == [4, 4]
