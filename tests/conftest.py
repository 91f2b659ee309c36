"""
Pytest configuration and shared fixtures for keyboard friendly view tests.
"""

import os
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Qt widgets in integration tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.scene import SceneModel, SceneItem, Position
from services.settings_manager import SettingsManager, reset_settings_manager


# ============== Temporary Directory Fixtures ==============

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="kfv_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


# ============== Scene Fixtures ==============

def make_item(item_id: str, x: float, y: float, **flags) -> SceneItem:
    """Create a scene item at (x, y) with optional flag overrides."""
    return SceneItem(id=item_id, position=Position(x, y), **flags)


@pytest.fixture
def empty_scene() -> SceneModel:
    """Create an empty scene."""
    return SceneModel()


@pytest.fixture
def cross_scene() -> SceneModel:
    """
    Focus item at the origin with one item in each direction.

            up
    left  center  right
           down
    """
    scene = SceneModel()
    scene.add_item(make_item("center", 0, 0))
    scene.add_item(make_item("up", 0, -100))
    scene.add_item(make_item("down", 0, 100))
    scene.add_item(make_item("left", -100, 0))
    scene.add_item(make_item("right", 100, 0))
    scene.set_focus("center")
    scene.select("center")
    return scene


@pytest.fixture
def grid_scene() -> SceneModel:
    """3x3 grid, 50 units apart, focus and selection on the middle item."""
    scene = SceneModel()
    for row in range(3):
        for col in range(3):
            scene.add_item(make_item(f"r{row}c{col}", col * 50, row * 50))
    scene.set_focus("r1c1")
    scene.select("r1c1")
    return scene


# ============== Settings Fixtures ==============

@pytest.fixture
def settings_path(temp_dir: Path) -> Path:
    """Settings file path inside the temporary directory."""
    return temp_dir / "config" / "settings.json"


@pytest.fixture
def settings_manager(settings_path: Path) -> Generator[SettingsManager, None, None]:
    """Settings manager backed by a temporary file."""
    reset_settings_manager()
    yield SettingsManager(str(settings_path))
    reset_settings_manager()


# ============== Qt Fixtures ==============

@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication for widget tests."""
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def activate_scene(scene):
    """
    Make a graphics scene active so its items can take focus
    without showing a window.
    """
    from PyQt6.QtCore import QEvent
    from PyQt6.QtWidgets import QApplication
    QApplication.sendEvent(scene, QEvent(QEvent.Type.WindowActivate))
    assert scene.isActive()
