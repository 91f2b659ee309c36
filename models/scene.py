"""
Scene data models.

These models are a toolkit-independent snapshot of a graphics scene:
positioned items with their interaction flags, plus the focus and
selection state of the scene that owns them.
"""

import math
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Dict, Iterator, List, Optional, Set, Tuple


class Direction(Enum):
    """
    Direction of a keyboard navigation step.

    Scene coordinates grow to the right (x) and downwards (y),
    so UP is a negative y offset.
    """
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def offset(self, step: float) -> Tuple[float, float]:
        """Return the (dx, dy) translation for a step in this direction."""
        if self == Direction.UP:
            return 0.0, -step
        if self == Direction.DOWN:
            return 0.0, step
        if self == Direction.LEFT:
            return -step, 0.0
        return step, 0.0


class NavigationKey(Enum):
    """Keys the keyboard controller responds to."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()

    @property
    def direction(self) -> Optional[Direction]:
        """Direction for an arrow key, None for SPACE."""
        return _KEY_DIRECTIONS.get(self)


_KEY_DIRECTIONS = {
    NavigationKey.UP: Direction.UP,
    NavigationKey.DOWN: Direction.DOWN,
    NavigationKey.LEFT: Direction.LEFT,
    NavigationKey.RIGHT: Direction.RIGHT,
}


class KeyModifiers(Flag):
    """Keyboard modifiers held during a key press."""
    NONE = 0
    SHIFT = auto()
    CONTROL = auto()


@dataclass
class Position:
    """2D position of an item in scene coordinates."""
    x: float = 0.0
    y: float = 0.0

    def translated(self, dx: float, dy: float) -> "Position":
        """Return a new position offset by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance to another position."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)


@dataclass
class SceneItem:
    """
    A positioned item in the scene.

    Only geometry and interaction flags live here. Whether the item
    is selected or focused is state of the SceneModel that holds it.
    """
    id: str
    position: Position = field(default_factory=Position)
    visible: bool = True
    selectable: bool = True
    focusable: bool = True
    movable: bool = True

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y


@dataclass
class SceneModel:
    """
    Arena of scene items indexed by id.

    Iteration order is insertion order. At most one item has focus;
    any number of items can be selected.
    """
    items: Dict[str, SceneItem] = field(default_factory=dict)
    focus_id: Optional[str] = None
    selected_ids: Set[str] = field(default_factory=set)

    def __iter__(self) -> Iterator[SceneItem]:
        return iter(self.items.values())

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self.items

    # ----- Items -----

    def add_item(self, item: SceneItem) -> SceneItem:
        """Add an item to the arena, replacing any item with the same id."""
        self.items[item.id] = item
        return item

    def get_item(self, item_id: str) -> SceneItem:
        """Get an item by id. Raises KeyError for unknown ids."""
        return self.items[item_id]

    def remove_item(self, item_id: str) -> SceneItem:
        """Remove an item, dropping its focus and selection state."""
        item = self.items.pop(item_id)
        self.selected_ids.discard(item_id)
        if self.focus_id == item_id:
            self.focus_id = None
        return item

    def move_item(self, item_id: str, dx: float, dy: float) -> SceneItem:
        """Translate an item by (dx, dy)."""
        item = self.get_item(item_id)
        item.position = item.position.translated(dx, dy)
        return item

    # ----- Focus -----

    @property
    def focus_item(self) -> Optional[SceneItem]:
        """The item that currently has focus, if any."""
        if self.focus_id is None:
            return None
        return self.items.get(self.focus_id)

    def set_focus(self, item_id: Optional[str]):
        """Give focus to an item, or clear it with None."""
        if item_id is not None and item_id not in self.items:
            raise KeyError(item_id)
        self.focus_id = item_id

    def clear_focus(self):
        self.focus_id = None

    # ----- Selection -----

    def is_selected(self, item_id: str) -> bool:
        return item_id in self.selected_ids

    def select(self, item_id: str):
        """Mark an item as selected."""
        if item_id not in self.items:
            raise KeyError(item_id)
        self.selected_ids.add(item_id)

    def deselect(self, item_id: str):
        self.selected_ids.discard(item_id)

    def clear_selection(self):
        self.selected_ids.clear()

    def selected_items(self) -> List[SceneItem]:
        """Selected items in iteration order."""
        return [item for item in self.items.values() if item.id in self.selected_ids]
