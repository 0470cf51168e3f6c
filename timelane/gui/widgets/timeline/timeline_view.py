"""
Timeline View Module.

Provides the TimelineView class for rendering and interacting with the timeline.
"""

import logging
from typing import Dict, Optional

from PySide6.QtCore import QRectF, Qt, QTimer, Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QApplication, QGraphicsView, QLineEdit

from timelane.app.constants import KEY_ENTER, KEY_ESCAPE
from timelane.core.interaction import InteractionController, Mode
from timelane.core.layout import TimelineLayout
from timelane.gui.widgets.timeline.item_bar import ItemBar
from timelane.gui.widgets.timeline.timeline_scene import MonthBandItem, TimelineScene

logger = logging.getLogger(__name__)


class NameEditor(QLineEdit):
    """
    Inline line edit shown over an item bar while its name is edited.
    """

    key_committed = Signal(str)  # KEY_ENTER or KEY_ESCAPE
    focus_lost = Signal()

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key_Return, Qt.Key_Enter):
            self.key_committed.emit(KEY_ENTER)
            return
        if event.key() == Qt.Key_Escape:
            self.key_committed.emit(KEY_ESCAPE)
            return
        super().keyPressEvent(event)

    def focusOutEvent(self, event):
        super().focusOutEvent(event)
        self.focus_lost.emit()


class TimelineView(QGraphicsView):
    """
    Custom Graphics View for displaying the timeline layout.
    Handles:
    - Rendering month columns and lanes of item bars.
    - Forwarding pointer and keyboard input to the InteractionController.
    - Zoom, which widens the track without touching item dates.
    """

    item_clicked = Signal(object)  # item id; a press/release without drag
    zoom_changed = Signal(float)

    def __init__(
        self,
        layout: TimelineLayout,
        controller: InteractionController,
        parent=None,
    ):
        """
        Initializes the TimelineView.

        Args:
            layout (TimelineLayout): Layout to render; the view repaints
                whenever it recomputes.
            controller (InteractionController): Receives pointer input.
            parent (QWidget, optional): The parent widget. Defaults to None.
        """
        super().__init__(parent)
        self.scene = TimelineScene(self)
        self.setScene(self.scene)

        self.timeline_layout = layout
        self.controller = controller
        self.config = layout.config

        self.setRenderHint(QPainter.Antialiasing)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        self.setMouseTracking(True)

        self._bars: Dict[object, ItemBar] = {}
        self._editor: Optional[NameEditor] = None
        self._press_item_id = None
        self._press_x = 0.0

        # Clicks wait out the double-click interval so a double-click opens
        # the name editor without also reporting a click.
        self._pending_click_id = None
        self._click_timer = QTimer(self)
        self._click_timer.setSingleShot(True)
        self._click_timer.setInterval(QApplication.doubleClickInterval())
        self._click_timer.timeout.connect(self._emit_pending_click)

        self._unsubscribe = layout.subscribe(lambda _layout: self.rebuild())
        self.rebuild()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def base_track_width(self) -> float:
        """Unzoomed track width: the viewport width, but never below the minimum."""
        return float(max(self.viewport().width(), self.config.track_min_width))

    def track_width(self) -> float:
        """Rendered track width at the current zoom level."""
        return self.base_track_width() * self.controller.zoom_level

    def bar(self, item_id) -> Optional[ItemBar]:
        return self._bars.get(item_id)

    def rebuild(self):
        """
        Recreates the scene from the current layout.

        The layout is a pure function of the item set, so the scene is
        rebuilt rather than patched.
        """
        self.scene.clear()
        self._bars = {}

        layout = self.timeline_layout
        if layout.is_empty:
            self.scene.setSceneRect(QRectF(0, 0, self.base_track_width(), 0))
            return

        mapper = layout.require_mapper()
        track_width = self.track_width()
        content_height = max(layout.content_height(), self.viewport().height())

        for index, (span, geometry) in enumerate(mapper.month_geometry()):
            x, width = mapper.to_pixels(geometry, track_width)
            self.scene.addItem(
                MonthBandItem(
                    span, index, x, width, self.config.header_height, content_height
                )
            )

        active_id = self.controller.state.active_item_id
        for lane_index, lane in enumerate(layout.lanes):
            y = layout.lane_top(lane_index)
            for item in lane:
                x, width = mapper.to_pixels(mapper.geometry(item), track_width)
                bar = ItemBar(
                    item, width, self.config.lane_height, self.config.handle_width
                )
                bar.setPos(x, y)
                bar.set_active(item.id == active_id)
                self.scene.addItem(bar)
                self._bars[item.id] = bar

        self.scene.setSceneRect(QRectF(0, 0, track_width, content_height))

        if self._editor is not None:
            self._place_editor()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.rebuild()

    # ------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------

    def zoom_in(self) -> float:
        return self._apply_zoom(self.controller.zoom_in())

    def zoom_out(self) -> float:
        return self._apply_zoom(self.controller.zoom_out())

    def _apply_zoom(self, level: float) -> float:
        self.rebuild()
        self.zoom_changed.emit(level)
        return level

    def wheelEvent(self, event):
        """Ctrl+wheel zooms; plain wheel scrolls."""
        if event.modifiers() & Qt.ControlModifier:
            if event.angleDelta().y() > 0:
                self.zoom_in()
            elif event.angleDelta().y() < 0:
                self.zoom_out()
            event.accept()
            return
        super().wheelEvent(event)

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def _bar_at(self, viewport_pos) -> Optional[ItemBar]:
        item = self.itemAt(viewport_pos)
        return item if isinstance(item, ItemBar) else None

    def mousePressEvent(self, event):
        """
        Starts a move or resize on the pressed bar.
        """
        if self.controller.state.mode is Mode.EDITING_NAME:
            self._finish_name_edit(self.controller.blur)

        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        bar = self._bar_at(pos.toPoint())
        if bar is None:
            super().mousePressEvent(event)
            return

        local_x = bar.mapFromScene(self.mapToScene(pos.toPoint())).x()
        role = bar.role_at(local_x)
        if self.controller.pointer_down(
            bar.item_id, pos.x(), role, self.base_track_width()
        ):
            self._press_item_id = bar.item_id
            self._press_x = pos.x()
            bar.set_active(True)
        event.accept()

    def mouseMoveEvent(self, event):
        if self.controller.state.is_dragging:
            self.controller.pointer_move(event.position().x())
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        """
        Ends the gesture. A release that changed nothing and barely moved
        counts as a click.
        """
        if not self.controller.state.is_dragging:
            super().mouseReleaseEvent(event)
            return

        committed = self.controller.pointer_up()
        item_id = self._press_item_id
        self._press_item_id = None

        distance = abs(event.position().x() - self._press_x)
        if committed is None and distance < QApplication.startDragDistance():
            self._pending_click_id = item_id
            self._click_timer.start()

        self.rebuild()
        event.accept()

    def leaveEvent(self, event):
        """Leaving the track ends a drag at its last valid position."""
        if self.controller.state.is_dragging:
            self.controller.pointer_leave()
            self._press_item_id = None
            self.rebuild()
        super().leaveEvent(event)

    def mouseDoubleClickEvent(self, event):
        """Opens the inline name editor on the double-clicked bar."""
        bar = self._bar_at(event.position().toPoint())
        if bar is None:
            super().mouseDoubleClickEvent(event)
            return

        self._click_timer.stop()
        self._pending_click_id = None
        if self.controller.double_click(bar.item_id):
            self._open_editor(bar.item.name)
        event.accept()

    def _emit_pending_click(self):
        item_id, self._pending_click_id = self._pending_click_id, None
        if item_id is not None:
            self.item_clicked.emit(item_id)

    # ------------------------------------------------------------------
    # Name editing
    # ------------------------------------------------------------------

    def _open_editor(self, text: str):
        self._editor = NameEditor(self.viewport())
        self._editor.setText(text)
        self._editor.textEdited.connect(self.controller.edit_name)
        self._editor.key_committed.connect(
            lambda key: self._finish_name_edit(lambda: self.controller.key_press(key))
        )
        self._editor.focus_lost.connect(
            lambda: self._finish_name_edit(self.controller.blur)
        )
        self._place_editor()
        self._editor.show()
        self._editor.setFocus()
        self._editor.selectAll()

    def _place_editor(self):
        bar = self._bars.get(self.controller.state.active_item_id)
        if bar is None or self._editor is None:
            return
        rect = self.mapFromScene(bar.sceneBoundingRect()).boundingRect()
        self._editor.setGeometry(rect)

    def _finish_name_edit(self, commit):
        """
        Commits the draft name through ``commit`` and removes the editor.

        Args:
            commit: Controller call that ends editing (key_press or blur).
        """
        if self._editor is None:
            return
        editor, self._editor = self._editor, None
        commit()
        editor.hide()
        editor.deleteLater()
        self.rebuild()

    @property
    def name_editor(self) -> Optional[NameEditor]:
        return self._editor

    def close(self):
        self._unsubscribe()
        return super().close()
