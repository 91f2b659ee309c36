"""Views package."""

from .navigable_item import NavigableItem
from .keyboard_friendly_view import (
    KeyboardFriendlyView,
    to_navigation_key,
    to_key_modifiers,
)
from .demo_dialog import DemoDialog

__all__ = [
    "NavigableItem",
    "KeyboardFriendlyView",
    "to_navigation_key",
    "to_key_modifiers",
    "DemoDialog",
]
