"""
Main Application Entry Point.
Responsible for initializing logging, configuration and the MainWindow.
"""

import argparse
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from PySide6.QtCore import QSettings, Qt
from PySide6.QtWidgets import QApplication, QFileDialog, QMainWindow, QStatusBar

from timelane.app.constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    ITEMS_FILE_FILTER,
    SETTINGS_GEOMETRY_KEY,
    SETTINGS_LAST_ITEMS_FILE_KEY,
    STATUS_ERROR_PREFIX,
    STATUS_LOAD_FAIL,
    WINDOW_SETTINGS_APP,
    WINDOW_SETTINGS_KEY,
    WINDOW_TITLE,
)
from timelane.cli.utils import load_items_file
from timelane.core.config import TimelineConfig, load_config
from timelane.core.errors import TimelineError
from timelane.core.logging_config import get_logger, setup_logging, shutdown_logging
from timelane.gui.widgets.timeline import TimelineWidget

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """
    The main application window.

    Hosts the TimelineWidget and reports load errors and committed
    edits in the status bar.
    """

    def __init__(self, config: Optional[TimelineConfig] = None):
        """
        Initializes the MainWindow.

        Args:
            config (TimelineConfig, optional): Timeline settings.
        """
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.timeline = TimelineWidget(config=config)
        self.timeline.item_committed.connect(self._on_item_committed)
        self.setCentralWidget(self.timeline)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction("&Open Items...", self.open_items_dialog)
        file_menu.addSeparator()
        file_menu.addAction("E&xit", self.close)

        view_menu = self.menuBar().addMenu("&View")
        view_menu.addAction("Zoom &In", self.timeline.zoom_in)
        view_menu.addAction("Zoom &Out", self.timeline.zoom_out)

        self._restore_window_state()

    def _restore_window_state(self):
        """Restores window geometry from settings."""
        settings = QSettings(WINDOW_SETTINGS_KEY, WINDOW_SETTINGS_APP)
        geometry = settings.value(SETTINGS_GEOMETRY_KEY)
        if geometry:
            self.restoreGeometry(geometry)

    def load_items(self, path: str) -> bool:
        """
        Loads an items file into the timeline.

        Args:
            path: Path to a JSON items file.

        Returns:
            bool: True if the items were loaded.
        """
        try:
            self.timeline.set_items(load_items_file(path))
        except (OSError, ValueError, KeyError, TimelineError) as e:
            logger.error(f"Failed to load items from {path}: {e}")
            self.status_bar.showMessage(f"{STATUS_ERROR_PREFIX}{STATUS_LOAD_FAIL}")
            return False

        settings = QSettings(WINDOW_SETTINGS_KEY, WINDOW_SETTINGS_APP)
        settings.setValue(SETTINGS_LAST_ITEMS_FILE_KEY, path)
        count = len(self.timeline.store)
        logger.info(f"Loaded {count} items from {path}")
        self.status_bar.showMessage(f"Loaded {count} item(s) from {path}", 3000)
        return True

    def open_items_dialog(self):
        """Asks for an items file and loads it."""
        settings = QSettings(WINDOW_SETTINGS_KEY, WINDOW_SETTINGS_APP)
        last_path = settings.value(SETTINGS_LAST_ITEMS_FILE_KEY, "")
        path, _ = QFileDialog.getOpenFileName(
            self, "Open Items", os.path.dirname(last_path or ""), ITEMS_FILE_FILTER
        )
        if path:
            self.load_items(path)

    def _on_item_committed(self, item):
        self.status_bar.showMessage(
            f"Updated '{item.name}': {item.start} - {item.end}", 3000
        )

    def closeEvent(self, event):
        """
        Handles application close event.
        Saves window geometry.
        """
        settings = QSettings(WINDOW_SETTINGS_KEY, WINDOW_SETTINGS_APP)
        settings.setValue(SETTINGS_GEOMETRY_KEY, self.saveGeometry())
        event.accept()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Timelane timeline viewer")
    parser.add_argument("items", nargs="?", help="Path to JSON items file")
    parser.add_argument(
        "--config", default=None, help="Path to JSON timeline config"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main() -> None:
    """
    Main entry point.
    Loads environment settings and launches MainWindow.
    """
    load_dotenv()
    args = parse_args()

    debug = args.debug or os.environ.get("TIMELANE_DEBUG") == "1"
    setup_logging(debug_mode=debug)

    try:
        logger.info("Starting Application...")
        config = load_config(args.config or os.environ.get("TIMELANE_CONFIG"))

        QApplication.setHighDpiScaleFactorRoundingPolicy(
            Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
        )
        app = QApplication(sys.argv[:1])
        app.setOrganizationName(WINDOW_SETTINGS_KEY)
        app.setApplicationName(WINDOW_SETTINGS_APP)

        window = MainWindow(config)
        if args.items:
            window.load_items(args.items)
        window.show()

        logger.info("Entering Event Loop...")
        exit_code = app.exec()
        shutdown_logging()
        sys.exit(exit_code)
    except Exception:
        logger.exception("CRITICAL: Unhandled exception in main application loop")
        sys.exit(1)


if __name__ == "__main__":
    main()
