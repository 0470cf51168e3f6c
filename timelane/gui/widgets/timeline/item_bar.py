"""
Timeline Item Bar Module.

Provides the ItemBar class for rendering a single item on the timeline.
"""

import logging

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtWidgets import QGraphicsItem

from timelane.core.interaction import TargetRole
from timelane.core.items import Item

logger = logging.getLogger(__name__)


class ItemBar(QGraphicsItem):
    """
    Rounded bar spanning an item's days, with a resize handle at each edge.

    The bar only paints and reports which part was hit; pointer handling
    lives in the view so the interaction controller sees every event.
    """

    COLOR = QColor("#6366f1")
    ACTIVE_COLOR = QColor("#ec4899")
    HANDLE_COLOR = QColor(0, 0, 0, 50)
    CORNER_RADIUS = 6
    TEXT_PADDING = 8

    def __init__(self, item: Item, width: float, height: float, handle_width: float):
        """
        Initializes the ItemBar.

        Args:
            item (Item): The item to represent.
            width (float): Bar width in scene pixels.
            height (float): Bar height in scene pixels.
            handle_width (float): Width of each edge handle.
        """
        super().__init__()
        self.item = item
        self.width = width
        self.height = height
        self.handle_width = handle_width
        self.active = False

        self.setAcceptHoverEvents(True)
        self.setToolTip(f"{item.name} ({item.start} - {item.end})")

    @property
    def item_id(self):
        return self.item.id

    def boundingRect(self) -> QRectF:
        return QRectF(0, 0, self.width, self.height)

    def role_at(self, local_x: float) -> TargetRole:
        """
        Classifies a point along the bar.

        Handles shrink on narrow bars so the body always stays grabbable.

        Args:
            local_x: X coordinate in item coordinates.

        Returns:
            TargetRole: Edge handle or body under the point.
        """
        handle = min(self.handle_width, self.width / 3)
        if local_x <= handle:
            return TargetRole.EDGE_START
        if local_x >= self.width - handle:
            return TargetRole.EDGE_END
        return TargetRole.ITEM_BODY

    def set_active(self, active: bool) -> None:
        if active != self.active:
            self.active = active
            self.update()

    def hoverMoveEvent(self, event):
        """Shows a resize cursor over the edge handles."""
        role = self.role_at(event.pos().x())
        if role is TargetRole.ITEM_BODY:
            self.setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self.setCursor(Qt.CursorShape.SizeHorCursor)
        super().hoverMoveEvent(event)

    def paint(self, painter, option, widget=None):
        """Draws the bar, its edge handles and the item name."""
        painter.setRenderHint(QPainter.Antialiasing)
        rect = self.boundingRect()

        color = self.ACTIVE_COLOR if self.active else self.COLOR
        painter.setBrush(QBrush(color))
        painter.setPen(Qt.NoPen)
        painter.drawRoundedRect(rect, self.CORNER_RADIUS, self.CORNER_RADIUS)

        handle = min(self.handle_width, self.width / 3)
        painter.setBrush(QBrush(self.HANDLE_COLOR))
        painter.drawRect(QRectF(0, 0, handle, self.height))
        painter.drawRect(QRectF(self.width - handle, 0, handle, self.height))

        painter.setPen(QPen(Qt.white))
        text_rect = rect.adjusted(
            handle + self.TEXT_PADDING / 2, 0, -(handle + self.TEXT_PADDING / 2), 0
        )
        elided = painter.fontMetrics().elidedText(
            self.item.name, Qt.ElideRight, int(max(text_rect.width(), 0))
        )
        painter.drawText(text_rect, Qt.AlignVCenter | Qt.AlignLeft, elided)
