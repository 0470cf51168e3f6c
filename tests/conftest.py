import pathlib
import sys

import pytest

# Ensure project root is in sys.path
repo_root = pathlib.Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

try:
    from PySide6.QtWidgets import QApplication
except ImportError:
    QApplication = None

from timelane.core.items import Item  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """
    Ensure QApplication is instantiated only once.
    """
    if QApplication is None:
        yield None
        return

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def sample_items():
    """
    Three items over two lanes: 1 and 3 share lane 0, 2 overlaps 1.
    """
    return [
        Item(id=1, name="A", start="2024-01-01", end="2024-01-05"),
        Item(id=2, name="B", start="2024-01-03", end="2024-01-08"),
        Item(id=3, name="C", start="2024-01-06", end="2024-01-10"),
    ]


@pytest.fixture
def sample_items_file():
    """Path to the bundled sample items file."""
    return repo_root / "data" / "sample_items.json"
