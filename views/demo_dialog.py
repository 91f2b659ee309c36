"""
Demo dialog for the keyboard friendly view.

Shows a KeyboardFriendlyView filled with navigable items. The
"virtual bastard" is a timer that hammers the view with random
key presses, to check navigation never gets stuck or crashes.

Keys:
- F1: About
- F2: Toggle virtual bastard
- Escape: Quit
"""

import logging
import random
from typing import List, Optional
from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QMessageBox, QGraphicsScene, QWidget
)

from models import KeyModifiers, NavigationKey
from services.keyboard_controller import KeyboardController
from services.settings_manager import SettingsManager, get_settings
from services.version_info import get_version, get_version_history
from views.keyboard_friendly_view import KeyboardFriendlyView
from views.navigable_item import NavigableItem, COLORS

logger = logging.getLogger(__name__)


# Modifier combinations the virtual bastard chooses from
_RANDOM_MODIFIERS = [
    KeyModifiers.NONE,
    KeyModifiers.SHIFT,
    KeyModifiers.CONTROL,
]


class DemoDialog(QDialog):
    """Dialog hosting a keyboard friendly view with demo items."""

    def __init__(self, settings: Optional[SettingsManager] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._settings = settings if settings is not None else get_settings()
        nav = self._settings.navigation
        demo = self._settings.demo

        # One source for the controller, one for layout and key mashing
        self._rng = random.Random(nav.random_seed)
        controller = KeyboardController(random.Random(nav.random_seed), nav.move_step)

        self._scene = QGraphicsScene(self)
        self._scene.setBackgroundBrush(COLORS["background"])
        self._view = KeyboardFriendlyView(self._scene, controller, self)
        self._view.verbose = self._settings.verbose
        self._view.set_grid(self._settings.settings.ui.show_grid, self._settings.settings.ui.grid_size)

        self._timer_virtual_bastard = QTimer(self)
        self._timer_virtual_bastard.setInterval(demo.virtual_bastard_interval_ms)
        self._timer_virtual_bastard.timeout.connect(self._on_virtual_bastard)

        self._items: List[NavigableItem] = []
        self._setup_ui()
        self._populate(demo.item_count, demo.scene_width, demo.scene_height)

        if demo.virtual_bastard_on_start:
            self.toggle_virtual_bastard()

    def _setup_ui(self):
        self.setWindowTitle("Keyboard Friendly Graphics View")
        self.setMinimumSize(700, 520)

        layout = QVBoxLayout(self)

        self._status_label = QLabel()
        self._status_label.setStyleSheet("color: #6B7280; padding: 4px;")
        layout.addWidget(self._view)
        layout.addWidget(self._status_label)
        self._update_status()

    def _populate(self, count: int, width: float, height: float):
        """Scatter navigable items over the scene."""
        margin = NavigableItem.RADIUS * 2
        self._scene.setSceneRect(0, 0, width, height)
        for i in range(count):
            item = NavigableItem(str(i + 1))
            item.setPos(
                self._rng.uniform(margin, width - margin),
                self._rng.uniform(margin, height - margin),
            )
            self._scene.addItem(item)
            self._items.append(item)
        logger.debug(f"Added {count} demo items")

        if self._items:
            self._items[0].setSelected(True)
            self._items[0].setFocus()

    @property
    def view(self) -> KeyboardFriendlyView:
        return self._view

    @property
    def items(self) -> List[NavigableItem]:
        return list(self._items)

    @property
    def virtual_bastard_active(self) -> bool:
        return self._timer_virtual_bastard.isActive()

    def _update_status(self):
        bastard = "on" if self.virtual_bastard_active else "off"
        self._status_label.setText(
            "Arrows: move focus | Shift+Arrows: add to selection | "
            "Ctrl+Arrows: move selection | Space: random focus | "
            f"F1: about | F2: virtual bastard ({bastard}) | Esc: quit"
        )

    # ----- Actions -----

    def show_about(self):
        """Show version and history."""
        history = "\n".join(get_version_history())
        QMessageBox.about(
            self,
            "About",
            f"Keyboard Friendly Graphics View\nVersion {get_version()}\n\n{history}"
        )

    def toggle_virtual_bastard(self):
        """Start or stop the random key press timer."""
        if self._timer_virtual_bastard.isActive():
            self._timer_virtual_bastard.stop()
            logger.info("Virtual bastard stopped")
        else:
            self._timer_virtual_bastard.start()
            logger.info("Virtual bastard started")
        self._update_status()

    def quit(self):
        self._timer_virtual_bastard.stop()
        self.close()

    def _on_virtual_bastard(self):
        """Send a random key press to the view."""
        key = self._rng.choice(list(NavigationKey))
        modifiers = self._rng.choice(_RANDOM_MODIFIERS)
        self._view.handle_key(key, modifiers)

    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == Qt.Key.Key_F1:
            self.show_about()
            event.accept()
        elif event.key() == Qt.Key.Key_F2:
            self.toggle_virtual_bastard()
            event.accept()
        elif event.key() == Qt.Key.Key_Escape:
            self.quit()
            event.accept()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event):
        self._timer_virtual_bastard.stop()
        super().closeEvent(event)
