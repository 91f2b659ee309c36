"""
Keyboard friendly graphics view.

A QGraphicsView whose items can be navigated, selected and moved
with the keyboard:

- Arrow: focus and select the closest item in that direction
- Shift + Arrow: add the closest item in that direction to the selection
- Ctrl + Arrow: move the selected items
- Space: focus a random item
- Ctrl + Space: select a random item

Key presses are handled on a SceneModel snapshot of the Qt scene.
The resulting positions, selection and focus are then written back
to the graphics items.
"""

import logging
from typing import Dict, List, Optional, Tuple
from PyQt6.QtCore import Qt, QRectF, pyqtSignal
from PyQt6.QtGui import QPainter, QPen, QKeyEvent
from PyQt6.QtWidgets import QGraphicsView, QGraphicsScene, QGraphicsItem, QWidget

from models import KeyModifiers, NavigationKey, Position, SceneItem, SceneModel
from services.keyboard_controller import KeyboardController
from views.navigable_item import COLORS

# Setup logger for this module
logger = logging.getLogger(__name__)


KEY_MAP = {
    Qt.Key.Key_Up: NavigationKey.UP,
    Qt.Key.Key_Down: NavigationKey.DOWN,
    Qt.Key.Key_Left: NavigationKey.LEFT,
    Qt.Key.Key_Right: NavigationKey.RIGHT,
    Qt.Key.Key_Space: NavigationKey.SPACE,
}

ItemFlag = QGraphicsItem.GraphicsItemFlag


def to_navigation_key(key: int) -> Optional[NavigationKey]:
    """Map a Qt key code to a navigation key, None if it has no meaning here."""
    try:
        return KEY_MAP.get(Qt.Key(key))
    except ValueError:
        return None


def to_key_modifiers(modifiers: Qt.KeyboardModifier) -> KeyModifiers:
    """Map Qt keyboard modifiers to the modifiers the controller knows."""
    result = KeyModifiers.NONE
    if modifiers & Qt.KeyboardModifier.ShiftModifier:
        result |= KeyModifiers.SHIFT
    if modifiers & Qt.KeyboardModifier.ControlModifier:
        result |= KeyModifiers.CONTROL
    return result


class KeyboardFriendlyView(QGraphicsView):
    """
    Graphics view with keyboard navigation.

    Creates its own scene unless one is given.
    """

    # Signals
    focusMoved = pyqtSignal(object)  # QGraphicsItem or None
    itemsMoved = pyqtSignal(list)    # list of QGraphicsItem

    def __init__(self, scene: Optional[QGraphicsScene] = None,
                 controller: Optional[KeyboardController] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setScene(scene if scene is not None else QGraphicsScene(self))
        self._controller = controller if controller is not None else KeyboardController()
        self._verbose = False
        self._show_grid = True
        self._grid_size = 50

        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    @property
    def controller(self) -> KeyboardController:
        return self._controller

    @property
    def verbose(self) -> bool:
        return self._verbose

    @verbose.setter
    def verbose(self, value: bool):
        self._verbose = value

    def set_grid(self, show: bool, size: int = 50):
        """Show or hide the background grid."""
        self._show_grid = show
        self._grid_size = size
        self.viewport().update()

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Draw grid background."""
        super().drawBackground(painter, rect)
        if not self._show_grid:
            return

        grid_size = self._grid_size
        left = int(rect.left()) - (int(rect.left()) % grid_size)
        top = int(rect.top()) - (int(rect.top()) % grid_size)

        painter.setPen(QPen(COLORS["grid"], 1))

        # Vertical lines
        x = left
        while x < rect.right():
            painter.drawLine(int(x), int(rect.top()), int(x), int(rect.bottom()))
            x += grid_size

        # Horizontal lines
        y = top
        while y < rect.bottom():
            painter.drawLine(int(rect.left()), int(y), int(rect.right()), int(y))
            y += grid_size

    # ----- Scene snapshot -----

    def scene_snapshot(self) -> Tuple[SceneModel, Dict[str, QGraphicsItem]]:
        """
        Build a SceneModel from the items in the scene.

        Returns:
            The model and a lookup from item id back to graphics item
        """
        model = SceneModel()
        lookup: Dict[str, QGraphicsItem] = {}
        focus = self.scene().focusItem()

        for index, item in enumerate(self.scene().items()):
            item_id = str(index)
            flags = item.flags()
            pos = item.pos()
            model.add_item(SceneItem(
                id=item_id,
                position=Position(pos.x(), pos.y()),
                visible=item.isVisible(),
                selectable=bool(flags & ItemFlag.ItemIsSelectable),
                focusable=bool(flags & ItemFlag.ItemIsFocusable),
                movable=bool(flags & ItemFlag.ItemIsMovable),
            ))
            if item.isSelected():
                model.select(item_id)
            if item is focus:
                model.set_focus(item_id)
            lookup[item_id] = item

        return model, lookup

    def _apply_snapshot(self, model: SceneModel, lookup: Dict[str, QGraphicsItem]):
        """Write positions, selection and focus from the model to the items."""
        previous_focus = self.scene().focusItem()
        new_focus = lookup[model.focus_id] if model.focus_id is not None else None

        if previous_focus is not None and previous_focus is not new_focus:
            if new_focus is None:
                self.really_lose_focus()
            else:
                previous_focus.clearFocus()

        moved: List[QGraphicsItem] = []
        for item_id, item in lookup.items():
            position = model.get_item(item_id).position
            if item.pos().x() != position.x or item.pos().y() != position.y:
                item.setPos(position.x, position.y)
                moved.append(item)

        # Deselect before selecting so a single selection never overlaps
        for item_id, item in lookup.items():
            if item.isSelected() and not model.is_selected(item_id):
                item.setSelected(False)
        for item_id, item in lookup.items():
            if model.is_selected(item_id) and not item.isSelected():
                item.setSelected(True)
                if not item.isSelected():
                    logger.warning(f"setSelected did not select item {item_id}")

        if new_focus is not None and new_focus is not previous_focus:
            new_focus.setFocus()
            if not new_focus.hasFocus():
                logger.warning(f"setFocus did not give focus to item {model.focus_id}")

        if moved:
            self.itemsMoved.emit(moved)
        if new_focus is not previous_focus:
            self.focusMoved.emit(new_focus)
        self.scene().update()

    def really_lose_focus(self):
        """
        Take focus away from the focus item.

        Disabling the item first makes the scene drop its focus
        reference as well, which clearFocus alone does not always do.
        """
        item = self.scene().focusItem()
        if item is None:
            return
        item.setEnabled(False)
        item.setSelected(False)
        item.clearFocus()
        item.setEnabled(True)

    # ----- Keyboard -----

    def handle_key(self, key: NavigationKey, modifiers: KeyModifiers = KeyModifiers.NONE) -> bool:
        """Run a keyboard command against the scene."""
        model, lookup = self.scene_snapshot()
        handled = self._controller.handle_key(model, key, modifiers)
        if not handled:
            return False

        self._apply_snapshot(model, lookup)
        if self._verbose:
            # Report what the items ended up with, not what the model asked for
            focus = self.scene().focusItem()
            focus_id = next((i for i, item in lookup.items() if item is focus), None)
            selected = [i for i, item in lookup.items() if item.isSelected()]
            logger.info(f"{key.name} ({modifiers}): focus={focus_id}, selected={selected}")
        return True

    def keyPressEvent(self, event: QKeyEvent):
        """Handle arrow and space keys, pass everything else on."""
        key = to_navigation_key(event.key())
        if key is not None and self.handle_key(key, to_key_modifiers(event.modifiers())):
            event.accept()
            return
        super().keyPressEvent(event)
