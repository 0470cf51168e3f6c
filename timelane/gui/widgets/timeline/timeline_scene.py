"""
Timeline Scene Module.

Provides the scene and the month header/grid items for the timeline.
"""

import logging

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsSimpleTextItem

from timelane.core.date_range import MonthSpan

logger = logging.getLogger(__name__)


class TimelineScene(QGraphicsScene):
    """
    Custom Graphics Scene for the Timeline.
    """

    BACKGROUND = QColor("#111827")

    def __init__(self, parent=None):
        """
        Initializes the TimelineScene.

        Args:
            parent (QObject, optional): The parent object. Defaults to None.
        """
        super().__init__(parent)
        self.setBackgroundBrush(QBrush(self.BACKGROUND))


class MonthBandItem(QGraphicsRectItem):
    """
    One month column: a header cell with its label and a grid band below.
    Even months are shaded to separate adjacent columns.
    """

    BORDER = QColor("#374151")
    SHADE = QColor(31, 41, 55, 80)
    LABEL = QColor("#d1d5db")

    def __init__(
        self,
        span: MonthSpan,
        index: int,
        x: float,
        width: float,
        header_height: float,
        total_height: float,
    ):
        """
        Initializes the MonthBandItem.

        Args:
            span: The month being drawn.
            index: Position of the month in the range; even months are shaded.
            x: Left edge in scene pixels.
            width: Column width in scene pixels.
            header_height: Height of the header cell.
            total_height: Height of the whole column.
        """
        super().__init__(QRectF(x, 0, width, total_height))
        self.span = span

        pen = QPen(self.BORDER)
        pen.setCosmetic(True)
        self.setPen(pen)
        if index % 2 == 0:
            self.setBrush(QBrush(self.SHADE))
        else:
            self.setBrush(Qt.NoBrush)
        self.setZValue(-10)

        self.label = QGraphicsSimpleTextItem(span.start.strftime("%B %Y"), self)
        self.label.setBrush(QBrush(self.LABEL))
        label_rect = self.label.boundingRect()
        self.label.setPos(
            x + max((width - label_rect.width()) / 2, 2),
            (header_height - label_rect.height()) / 2,
        )

        divider = QGraphicsRectItem(QRectF(x, header_height, width, 0), self)
        divider.setPen(pen)
