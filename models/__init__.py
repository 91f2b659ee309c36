"""
Models package.

This package contains the toolkit-independent scene models used by
the keyboard navigation services:
- Scene snapshot (SceneItem, SceneModel, Position)
- Keyboard input (Direction, NavigationKey, KeyModifiers)
"""

from .scene import (
    Direction,
    NavigationKey,
    KeyModifiers,
    Position,
    SceneItem,
    SceneModel,
)


__all__ = [
    "Direction",
    "NavigationKey",
    "KeyModifiers",
    "Position",
    "SceneItem",
    "SceneModel",
]
