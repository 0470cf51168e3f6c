"""
Item Details Dialog Module.

Provides a read-only dialog summarizing a single timeline item.
"""

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from timelane.core.items import Item


def format_display_date(value) -> str:
    """Formats a date as e.g. "Jan 5, 2024"."""
    return f"{value:%b} {value.day}, {value.year}"


def describe_item(item: Item) -> str:
    """
    Returns the item's description, or a generated one if it has none.

    Args:
        item: The item to describe.

    Returns:
        str: Text for the description field.
    """
    if item.description:
        return item.description
    return (
        f"This task involves working on {item.name} according to the "
        f"project timeline."
    )


class ItemDetailsDialog(QDialog):
    """
    A dialog showing an item's name, duration, dates and description.
    Escape and the Close button both dismiss it.
    """

    def __init__(self, item: Item, parent: Optional[QWidget] = None) -> None:
        """
        Initializes the dialog.

        Args:
            item: The item to show.
            parent: Parent widget.
        """
        super().__init__(parent)
        self.item = item
        self.setWindowTitle(item.name)
        self.setMinimumWidth(360)

        main_layout = QVBoxLayout(self)

        self.title_label = QLabel(item.name)
        self.title_label.setObjectName("ItemDetailsTitle")
        self.title_label.setWordWrap(True)
        main_layout.addWidget(self.title_label)

        self.form_layout = QFormLayout()
        days = item.duration_days
        self.duration_label = QLabel(f"{days} day{'s' if days != 1 else ''}")
        self.start_label = QLabel(format_display_date(item.start))
        self.end_label = QLabel(format_display_date(item.end))
        self.form_layout.addRow("Duration:", self.duration_label)
        self.form_layout.addRow("Start Date:", self.start_label)
        self.form_layout.addRow("End Date:", self.end_label)
        main_layout.addLayout(self.form_layout)

        self.description_label = QLabel(describe_item(item))
        self.description_label.setWordWrap(True)
        self.description_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        main_layout.addWidget(self.description_label)

        self.button_box = QDialogButtonBox(QDialogButtonBox.Close)
        self.button_box.rejected.connect(self.reject)
        main_layout.addWidget(self.button_box)
