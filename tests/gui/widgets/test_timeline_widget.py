"""
GUI tests for TimelineWidget and TimelineView.
"""

import pytest
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent

from timelane.app.constants import STATUS_EMPTY_TIMELINE
from timelane.core.interaction import Mode
from timelane.core.items import Item
from timelane.gui.dialogs.item_details_dialog import ItemDetailsDialog
from timelane.gui.widgets.timeline import ItemBar, MonthBandItem, TimelineWidget


@pytest.fixture
def timeline(qtbot):
    widget = TimelineWidget()
    qtbot.addWidget(widget)
    widget.resize(1000, 400)
    return widget


@pytest.fixture
def loaded(timeline, qtbot, sample_items):
    timeline.set_items(sample_items)
    timeline.show()
    qtbot.waitExposed(timeline)
    return timeline


def bar_center(view, item_id):
    bar = view.bar(item_id)
    return view.mapFromScene(bar.sceneBoundingRect().center())


def test_empty_timeline_shows_empty_state(timeline):
    assert timeline.timeline_layout.is_empty
    assert not timeline.empty_state.isHidden()
    assert timeline.view.isHidden()
    assert timeline.range_label.text() == ""
    assert timeline.empty_state.message() == STATUS_EMPTY_TIMELINE


def test_set_items_creates_bars(loaded):
    scene_items = loaded.view.scene.items()
    bars = [i for i in scene_items if isinstance(i, ItemBar)]
    months = [i for i in scene_items if isinstance(i, MonthBandItem)]

    assert sorted(bar.item_id for bar in bars) == [1, 2, 3]
    assert len(months) == 1
    assert loaded.empty_state.isHidden()
    assert loaded.range_label.text() == "Jan 2024 - Jan 2024"


def test_bars_placed_in_lanes(loaded):
    view = loaded.view
    layout = loaded.timeline_layout

    assert view.bar(1).y() == layout.lane_top(0)
    assert view.bar(2).y() == layout.lane_top(1)
    assert view.bar(3).y() == layout.lane_top(0)
    assert view.bar(1).x() < view.bar(2).x() < view.bar(3).x()


def test_zoom_buttons(loaded, qtbot):
    width = loaded.view.track_width()
    assert loaded.zoom_label.text() == "100%"

    qtbot.mouseClick(loaded.btn_zoom_in, Qt.LeftButton)

    assert loaded.controller.zoom_level == 1.25
    assert loaded.zoom_label.text() == "125%"
    assert loaded.view.track_width() == pytest.approx(width * 1.25)


def test_zoom_out_disabled_at_minimum(loaded):
    loaded.zoom_out()
    loaded.zoom_out()

    assert loaded.zoom_label.text() == "50%"
    assert not loaded.btn_zoom_out.isEnabled()
    assert loaded.btn_zoom_in.isEnabled()


def test_store_update_rebuilds_view(loaded):
    loaded.store.update(2, start="2024-01-11", end="2024-01-12")

    assert loaded.view.bar(2).y() == loaded.timeline_layout.lane_top(0)


def test_item_bar_roles(loaded):
    bar = loaded.view.bar(2)

    assert bar.role_at(0).value == "edge-start"
    assert bar.role_at(bar.width).value == "edge-end"
    assert bar.role_at(bar.width / 2).value == "item-body"


def test_click_opens_details(loaded, qtbot):
    view = loaded.view

    with qtbot.waitSignal(loaded.item_selected, timeout=2000) as blocker:
        qtbot.mouseClick(view.viewport(), Qt.LeftButton, pos=bar_center(view, 1))

    assert blocker.args == [1]
    assert isinstance(loaded.details_dialog, ItemDetailsDialog)
    assert loaded.details_dialog.item.id == 1
    loaded.details_dialog.close()


def test_drag_moves_item(loaded, qtbot):
    view = loaded.view
    start = bar_center(view, 3)
    day = view.track_width() / loaded.timeline_layout.date_range.total_days

    with qtbot.waitSignal(loaded.item_committed, timeout=1000) as blocker:
        qtbot.mousePress(view.viewport(), Qt.LeftButton, pos=start)
        assert loaded.controller.state.mode is Mode.MOVING
        loaded.controller.pointer_move(start.x() + 3 * day)
        loaded.controller.pointer_up()

    assert blocker.args[0].start.isoformat() == "2024-01-09"
    assert loaded.store.get(3).end.isoformat() == "2024-01-13"


def test_double_click_renames(loaded, qtbot):
    view = loaded.view
    pos = QPointF(bar_center(view, 1))
    event = QMouseEvent(
        QEvent.MouseButtonDblClick,
        pos,
        view.viewport().mapToGlobal(pos),
        Qt.LeftButton,
        Qt.LeftButton,
        Qt.NoModifier,
    )
    view.mouseDoubleClickEvent(event)

    editor = view.name_editor
    assert editor is not None
    assert editor.text() == "A"
    assert loaded.controller.state.mode is Mode.EDITING_NAME

    editor.clear()
    qtbot.keyClicks(editor, "Alpha")
    qtbot.keyClick(editor, Qt.Key_Return)

    assert loaded.store.get(1).name == "Alpha"
    assert view.name_editor is None
    assert loaded.controller.state.is_idle


def test_show_item_details_replaces_previous(loaded):
    first = loaded.show_item_details(1)
    second = loaded.show_item_details(2)

    assert second is loaded.details_dialog
    assert second is not first
    assert second.item.name == "B"
    second.close()


def test_clearing_items_shows_empty_state(loaded):
    loaded.set_items([])

    assert not loaded.empty_state.isHidden()
    assert loaded.view.isHidden()
    assert loaded.view.bar(1) is None


def test_single_day_item_keeps_minimum_width(timeline, qtbot):
    timeline.set_items(
        [
            Item(id="p", name="Plan", start="2024-01-01", end="2024-05-31"),
            Item(id="m", name="Milestone", start="2024-05-05", end="2024-05-05"),
        ]
    )
    timeline.show()
    qtbot.waitExposed(timeline)

    bar = timeline.view.bar("m")
    min_width = timeline.view.track_width() * timeline.config.min_width_fraction
    assert bar.width == pytest.approx(min_width)
