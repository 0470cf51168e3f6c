"""
Logging Configuration Module.

Sets up the root logger for the GUI: a size-rotated log file under ``logs/``
plus optional console echo. The CLI keeps to ``logging.basicConfig``.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from timelane import __version__

# Configuration
LOG_DIR = "logs"
LOG_FILENAME = "timelane.log"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SafeRotatingFileHandler(RotatingFileHandler):
    """
    RotatingFileHandler that keeps writing when rollover hits a locked file.

    Windows refuses to rename a log another process still has open; the
    rollover is skipped and retried on the next oversized write.
    """

    def doRollover(self) -> None:
        try:
            super().doRollover()
        except PermissionError:
            if sys.platform != "win32":
                raise


def resolve_log_path(log_dir: str = LOG_DIR) -> str:
    """
    Returns the log file path, creating ``log_dir`` if needed.

    Falls back to the working directory when the directory cannot be
    created.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError as e:
        print(f"Failed to create log directory: {e}. Logging to current directory.")
        return LOG_FILENAME
    return os.path.join(log_dir, LOG_FILENAME)


def _file_handler(
    path: str, level: int, formatter: logging.Formatter
) -> Optional[logging.Handler]:
    try:
        handler = SafeRotatingFileHandler(
            path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
    except OSError as e:
        print(f"CRITICAL: Could not set up file logging: {e}")
        return None
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logging(
    debug_mode: bool = False, log_to_console: bool = True, log_dir: str = LOG_DIR
) -> Optional[str]:
    """
    Replaces the root logger's handlers with a rotating file handler and an
    optional console handler.

    Safe to call more than once; earlier handlers are closed first.

    Args:
        debug_mode (bool): Log at DEBUG instead of INFO.
        log_to_console (bool): Also write to stderr.
        log_dir (str): Directory for ``timelane.log``.

    Returns:
        Optional[str]: The log file path, or None if file logging failed.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    level = logging.DEBUG if debug_mode else logging.INFO
    root_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path = resolve_log_path(log_dir)
    file_handler = _file_handler(log_path, level, formatter)
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    logging.info("=" * 60)
    logging.info(
        f"Timelane {__version__} Session Started at {datetime.now().isoformat()}"
    )
    logging.info("=" * 60)

    return log_path if file_handler is not None else None


def get_logger(name: str) -> logging.Logger:
    """Returns ``logging.getLogger(name)``."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Flushes and closes every handler so the log file is released."""
    logging.shutdown()
