"""
Directional navigation.

Finds the item that should receive focus when the user presses an
arrow key. Candidates are searched in two passes:

1. Strict: the candidate must lie in a 45 degree cone around the
   requested direction.
2. Loose: only the sign of the displacement has to match. Used only
   when the strict pass finds nothing.

The closest eligible candidate (focusable and visible) wins.
"""

import logging
from typing import Callable, List, Optional

from models.scene import Direction, Position, SceneItem, SceneModel

logger = logging.getLogger(__name__)

# Predicate over the displacement (dx, dy) from the focus item to a candidate
SearchFunction = Callable[[float, float], bool]


def _strict_up(dx: float, dy: float) -> bool:
    return dy < 0.0 and abs(dx) < abs(dy)


def _strict_down(dx: float, dy: float) -> bool:
    # NOTE: tests the sign of dx, not dy, unlike the other three cones.
    # Existing keyboard behavior depends on it, see DESIGN.md.
    return dx > 0.0 and abs(dx) < abs(dy)


def _strict_left(dx: float, dy: float) -> bool:
    return dx < 0.0 and abs(dy) < abs(dx)


def _strict_right(dx: float, dy: float) -> bool:
    return dx > 0.0 and abs(dy) < abs(dx)


_STRICT_SEARCH_FUNCTIONS = {
    Direction.UP: _strict_up,
    Direction.DOWN: _strict_down,
    Direction.LEFT: _strict_left,
    Direction.RIGHT: _strict_right,
}

_LOOSE_SEARCH_FUNCTIONS = {
    Direction.UP: lambda dx, dy: dy < 0.0,
    Direction.DOWN: lambda dx, dy: dy > 0.0,
    Direction.LEFT: lambda dx, dy: dx < 0.0,
    Direction.RIGHT: lambda dx, dy: dx > 0.0,
}


def get_strict_search_function(direction: Direction) -> SearchFunction:
    """Cone predicate for a direction."""
    try:
        return _STRICT_SEARCH_FUNCTIONS[direction]
    except KeyError:
        raise ValueError(f"Not a navigation direction: {direction!r}") from None


def get_loose_search_function(direction: Direction) -> SearchFunction:
    """Sign-only predicate for a direction."""
    try:
        return _LOOSE_SEARCH_FUNCTIONS[direction]
    except KeyError:
        raise ValueError(f"Not a navigation direction: {direction!r}") from None


def get_distance(a: Position, b: Position) -> float:
    """Euclidean distance between two positions."""
    return a.distance_to(b)


def get_non_selected_non_focus_items(scene: SceneModel, focus_item: SceneItem) -> List[SceneItem]:
    """All items that are neither selected nor the item navigated from."""
    return [
        item for item in scene
        if not scene.is_selected(item.id) and item.id != focus_item.id
    ]


def look(scene: SceneModel, focus_item: SceneItem, predicate: SearchFunction) -> List[SceneItem]:
    """
    Collect the candidates whose displacement from the focus item
    satisfies the predicate.
    """
    found = []
    for item in get_non_selected_non_focus_items(scene, focus_item):
        dx = item.x - focus_item.x
        dy = item.y - focus_item.y
        if predicate(dx, dy):
            found.append(item)
    return found


def get_closest(focus_item: SceneItem, items: List[SceneItem]) -> Optional[SceneItem]:
    """
    Closest focusable, visible item to the focus item.

    On equal distance the first item in the list wins.
    """
    best = None
    best_distance = float("inf")
    for item in items:
        if not item.focusable or not item.visible:
            continue
        distance = get_distance(focus_item.position, item.position)
        if distance < best_distance:
            best_distance = distance
            best = item
    return best


def find_next(
    scene: SceneModel,
    focus_item: Optional[SceneItem],
    direction: Direction,
) -> Optional[SceneItem]:
    """
    Find the item that should receive focus after moving in a direction.

    Args:
        scene: Scene snapshot to search
        focus_item: Item to navigate from, may be None
        direction: Requested direction

    Returns:
        The closest non-selected item in that direction, or None
    """
    if focus_item is None:
        return None

    candidates = look(scene, focus_item, get_strict_search_function(direction))
    if not candidates:
        # Nothing inside the cone, look more loosely
        candidates = look(scene, focus_item, get_loose_search_function(direction))
        logger.debug(f"Loose search {direction.name} from {focus_item.id}: {len(candidates)} candidates")
    else:
        logger.debug(f"Strict search {direction.name} from {focus_item.id}: {len(candidates)} candidates")

    if not candidates:
        return None

    closest = get_closest(focus_item, candidates)
    if closest is not None:
        logger.debug(f"Next item {direction.name} of {focus_item.id}: {closest.id}")
    return closest
