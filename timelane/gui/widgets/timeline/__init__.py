"""
Timeline Widget Package.

Main entry point for timeline visualization. Provides TimelineWidget wrapper
that combines TimelineView with zoom controls.

The timeline components live in separate modules:
- timeline/item_bar.py - ItemBar rendering
- timeline/timeline_scene.py - Scene and month columns
- timeline/timeline_view.py - Main view with pointer interaction and zoom
"""

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from timelane.app.constants import STATUS_EMPTY_HINT, STATUS_EMPTY_TIMELINE
from timelane.core.config import TimelineConfig
from timelane.core.interaction import InteractionController
from timelane.core.item_store import ItemStore
from timelane.core.items import Item
from timelane.core.layout import TimelineLayout
from timelane.gui.dialogs.item_details_dialog import ItemDetailsDialog
from timelane.gui.widgets.empty_state_widget import EmptyStateWidget
from timelane.gui.widgets.timeline.item_bar import ItemBar
from timelane.gui.widgets.timeline.timeline_scene import MonthBandItem, TimelineScene
from timelane.gui.widgets.timeline.timeline_view import NameEditor, TimelineView


class TimelineWidget(QWidget):
    """
    Wrapper widget for TimelineView + Toolbar.
    """

    item_selected = Signal(object)  # item id clicked without dragging
    item_committed = Signal(object)  # Item changed by a finished gesture

    def __init__(
        self,
        store: Optional[ItemStore] = None,
        config: Optional[TimelineConfig] = None,
        parent=None,
    ):
        """
        Initializes the TimelineWidget.

        Args:
            store (ItemStore, optional): Items to show. Defaults to an
                empty store.
            config (TimelineConfig, optional): Layout and zoom settings.
            parent (QWidget, optional): The parent widget. Defaults to None.
        """
        super().__init__(parent)
        self.setAttribute(Qt.WA_StyledBackground, True)

        self.store = store if store is not None else ItemStore()
        self.config = config or TimelineConfig()
        self.timeline_layout = TimelineLayout(self.store, self.config)
        self.controller = InteractionController(
            self.store,
            self.timeline_layout,
            self.config,
            on_commit=self.item_committed.emit,
        )

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setSpacing(0)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

        # Toolbar Container (Header)
        self.header_frame = QWidget()
        self.header_frame.setObjectName("TimelineHeader")
        self.toolbar_layout = QHBoxLayout(self.header_frame)
        self.toolbar_layout.setContentsMargins(4, 4, 4, 4)

        self.title_label = QLabel("Project Timeline")
        self.toolbar_layout.addWidget(self.title_label)

        self.range_label = QLabel()
        self.toolbar_layout.addWidget(self.range_label)

        self.toolbar_layout.addStretch()

        # Zoom controls
        self.btn_zoom_out = QPushButton("−")
        self.btn_zoom_out.setToolTip("Zoom Out")
        self.btn_zoom_out.setMaximumWidth(40)
        self.btn_zoom_out.clicked.connect(self.zoom_out)
        self.toolbar_layout.addWidget(self.btn_zoom_out)

        self.zoom_label = QLabel()
        self.zoom_label.setAlignment(Qt.AlignCenter)
        self.zoom_label.setMinimumWidth(50)
        self.toolbar_layout.addWidget(self.zoom_label)

        self.btn_zoom_in = QPushButton("+")
        self.btn_zoom_in.setToolTip("Zoom In")
        self.btn_zoom_in.setMaximumWidth(40)
        self.btn_zoom_in.clicked.connect(self.zoom_in)
        self.toolbar_layout.addWidget(self.btn_zoom_in)

        self.main_layout.addWidget(self.header_frame)

        # View
        self.view = TimelineView(self.timeline_layout, self.controller)
        self.view.item_clicked.connect(self.item_selected.emit)
        self.view.item_clicked.connect(self.show_item_details)
        self.view.zoom_changed.connect(self._update_zoom_label)
        self.main_layout.addWidget(self.view)

        self.empty_state = EmptyStateWidget(STATUS_EMPTY_TIMELINE, STATUS_EMPTY_HINT)
        self.main_layout.addWidget(self.empty_state)

        self.hint_label = QLabel(
            "Click on timeline items to view details. Double-click to edit name.\n"
            "Drag to move items, or drag edges to resize."
        )
        self.main_layout.addWidget(self.hint_label)

        self.details_dialog = None

        self.timeline_layout.subscribe(lambda _layout: self._update_header())
        self._update_header()
        self._update_zoom_label(self.controller.zoom_level)

    def set_items(self, items):
        """Replaces the displayed items."""
        self.store.load(items)

    def item(self, item_id) -> Item:
        return self.store.get(item_id)

    def show_item_details(self, item_id) -> ItemDetailsDialog:
        """
        Opens the details dialog for an item.

        Args:
            item_id: Id of the item to show.

        Returns:
            ItemDetailsDialog: The opened, non-blocking dialog.
        """
        if self.details_dialog is not None:
            self.details_dialog.close()
        self.details_dialog = ItemDetailsDialog(self.store.get(item_id), self)
        self.details_dialog.open()
        return self.details_dialog

    def zoom_in(self) -> float:
        """Zooms in one step."""
        return self.view.zoom_in()

    def zoom_out(self) -> float:
        """Zooms out one step."""
        return self.view.zoom_out()

    def _update_zoom_label(self, level: float):
        self.zoom_label.setText(f"{round(level * 100)}%")
        self.btn_zoom_in.setEnabled(level < self.config.zoom_max)
        self.btn_zoom_out.setEnabled(level > self.config.zoom_min)

    def _update_header(self):
        """Shows the range label, or the empty state when there are no items."""
        date_range = self.timeline_layout.date_range
        if date_range is None:
            self.range_label.setText("")
            self.view.hide()
            self.empty_state.show()
            return

        self.range_label.setText(
            f"{date_range.start:%b %Y} - {date_range.end:%b %Y}"
        )
        self.empty_state.hide()
        self.view.show()


__all__ = [
    "TimelineWidget",
    "ItemBar",
    "MonthBandItem",
    "NameEditor",
    "TimelineScene",
    "TimelineView",
]
