"""
Keyboard Controller.

Translates navigation key presses into focus, selection and
position changes on a SceneModel:

- Arrow: move focus and selection to the next item
- Shift + Arrow: add the next item to the selection and move focus
- Ctrl + Arrow: move all selected, movable items one step
- Space: focus and select a random item
- Ctrl + Space: select a random item
"""

import logging
import random
from typing import List, Optional

from models.scene import Direction, KeyModifiers, NavigationKey, SceneItem, SceneModel
from services.navigation import find_next

logger = logging.getLogger(__name__)


DEFAULT_MOVE_STEP = 10.0
DEFAULT_RANDOM_SEED = 0


class KeyboardController:
    """
    Applies keyboard commands to a scene.

    The controller keeps no scene state of its own. Its random
    source is passed in so random choices are reproducible.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 move_step: float = DEFAULT_MOVE_STEP):
        self._rng = rng if rng is not None else random.Random(DEFAULT_RANDOM_SEED)
        self._move_step = move_step

    @property
    def move_step(self) -> float:
        return self._move_step

    @property
    def rng(self) -> random.Random:
        return self._rng

    def handle_key(self, scene: SceneModel, key: NavigationKey,
                   modifiers: KeyModifiers = KeyModifiers.NONE) -> bool:
        """
        Dispatch a key press.

        Control takes precedence over Shift.

        Returns:
            True if the key belongs to one of the keyboard commands
        """
        direction = key.direction

        if modifiers & KeyModifiers.CONTROL:
            if key == NavigationKey.SPACE:
                self.set_random_selectedness(scene)
            else:
                self.move_selected(scene, direction)
            return True

        if modifiers & KeyModifiers.SHIFT:
            if direction is None:
                return False
            self.extend_selection(scene, direction)
            return True

        if key == NavigationKey.SPACE:
            self.set_random_focus(scene)
        else:
            self.move_focus(scene, direction)
        return True

    # ----- Navigation -----

    def move_focus(self, scene: SceneModel, direction: Direction) -> Optional[SceneItem]:
        """Move focus to the next item, making it the only selected item."""
        current = scene.focus_item
        if current is None:
            return None

        new_item = find_next(scene, current, direction)
        if new_item is None:
            return None

        scene.clear_selection()
        scene.select(new_item.id)
        scene.set_focus(new_item.id)
        return new_item

    def extend_selection(self, scene: SceneModel, direction: Direction) -> Optional[SceneItem]:
        """Add the next item to the selection and move focus to it."""
        current = scene.focus_item
        if current is None:
            return None

        new_item = find_next(scene, current, direction)
        if new_item is None:
            return None

        # The item focus leaves stays part of the selection
        scene.select(current.id)
        scene.select(new_item.id)
        scene.set_focus(new_item.id)
        return new_item

    def move_selected(self, scene: SceneModel, direction: Direction) -> List[SceneItem]:
        """Move every selected, movable item one step in a direction."""
        dx, dy = direction.offset(self._move_step)
        moved = []
        for item in scene.selected_items():
            if not item.movable:
                continue
            moved.append(scene.move_item(item.id, dx, dy))
        logger.debug(f"Moved {len(moved)} items by ({dx}, {dy})")
        return moved

    # ----- Random choice -----

    def really_lose_focus(self, scene: SceneModel):
        """Unfocus and deselect the focus item."""
        current = scene.focus_item
        if current is None:
            return
        scene.deselect(current.id)
        scene.clear_focus()

    def set_random_focus(self, scene: SceneModel) -> Optional[SceneItem]:
        """Clear focus and selection, then focus and select a random item."""
        self.really_lose_focus(scene)
        scene.clear_selection()

        items = [
            item for item in scene
            if item.focusable and item.selectable and item.visible
        ]
        if not items:
            return None

        new_item = self._rng.choice(items)
        scene.select(new_item.id)
        scene.set_focus(new_item.id)
        logger.debug(f"Random focus: {new_item.id}")
        return new_item

    def set_random_selectedness(self, scene: SceneModel) -> Optional[SceneItem]:
        """Clear focus and selection, then select a random item."""
        scene.clear_selection()
        scene.clear_focus()

        items = [item for item in scene if item.selectable and item.visible]
        if not items:
            return None

        new_item = self._rng.choice(items)
        scene.select(new_item.id)
        logger.debug(f"Random selection: {new_item.id}")
        return new_item
