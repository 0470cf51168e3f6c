"""
Empty State Widget Module.

Placeholder shown instead of the timeline while there is nothing to lay out.
"""

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget


class EmptyStateWidget(QWidget):
    """
    A centered message with an optional hint line beneath it.

    Hidden by default; the owner shows it when the item set is empty.
    """

    def __init__(
        self, message: str, hint: Optional[str] = None, parent=None
    ) -> None:
        """
        Initializes the empty state widget.

        Args:
            message: Main text, e.g. "No items to display."
            hint: Smaller follow-up text telling the user what to do.
            parent: The parent widget, if any.
        """
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.addStretch()

        self.message_label = QLabel(message)
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_label.setObjectName("EmptyStateMessage")
        layout.addWidget(self.message_label)

        self.hint_label = QLabel()
        self.hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.hint_label.setObjectName("EmptyStateHint")
        layout.addWidget(self.hint_label)

        layout.addStretch()
        self.set_hint(hint)
        self.hide()

    def set_message(self, message: str) -> None:
        self.message_label.setText(message)

    def set_hint(self, hint: Optional[str]) -> None:
        """Sets the hint line; None or "" hides it."""
        self.hint_label.setText(hint or "")
        self.hint_label.setVisible(bool(hint))

    def message(self) -> str:
        return self.message_label.text()
