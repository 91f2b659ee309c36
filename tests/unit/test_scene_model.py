"""
Unit tests for scene model classes.

Tests:
- Position geometry
- Direction offsets and key directions
- SceneModel item, focus and selection operations
"""

import math
import pytest
from models.scene import (
    Direction, NavigationKey, KeyModifiers, Position, SceneItem, SceneModel
)


class TestPosition:
    """Tests for Position class."""

    def test_distance(self):
        """Test Euclidean distance."""
        assert Position(0, 0).distance_to(Position(3, 4)) == 5.0
        assert Position(1, 1).distance_to(Position(1, 1)) == 0.0

    def test_translated_returns_new_position(self):
        """Test translation leaves the original untouched."""
        p = Position(10, 20)
        q = p.translated(-5, 5)
        assert (q.x, q.y) == (5, 25)
        assert (p.x, p.y) == (10, 20)


class TestDirection:
    """Tests for Direction and NavigationKey."""

    @pytest.mark.parametrize("direction,expected", [
        (Direction.UP, (0.0, -10.0)),
        (Direction.DOWN, (0.0, 10.0)),
        (Direction.LEFT, (-10.0, 0.0)),
        (Direction.RIGHT, (10.0, 0.0)),
    ])
    def test_offset(self, direction, expected):
        assert direction.offset(10.0) == expected

    def test_arrow_keys_have_direction(self):
        assert NavigationKey.UP.direction == Direction.UP
        assert NavigationKey.DOWN.direction == Direction.DOWN
        assert NavigationKey.LEFT.direction == Direction.LEFT
        assert NavigationKey.RIGHT.direction == Direction.RIGHT

    def test_space_has_no_direction(self):
        assert NavigationKey.SPACE.direction is None

    def test_modifiers_combine(self):
        mods = KeyModifiers.SHIFT | KeyModifiers.CONTROL
        assert mods & KeyModifiers.SHIFT
        assert mods & KeyModifiers.CONTROL
        assert not (KeyModifiers.NONE & KeyModifiers.SHIFT)


class TestSceneItem:
    """Tests for SceneItem class."""

    def test_defaults(self):
        item = SceneItem(id="a")
        assert item.visible and item.selectable and item.focusable and item.movable
        assert (item.x, item.y) == (0.0, 0.0)

    def test_coordinates_follow_position(self):
        item = SceneItem(id="a", position=Position(3, 7))
        assert item.x == 3
        assert item.y == 7


class TestSceneModel:
    """Tests for SceneModel operations."""

    def test_add_and_get(self, empty_scene):
        item = empty_scene.add_item(SceneItem(id="a"))
        assert empty_scene.get_item("a") is item
        assert "a" in empty_scene
        assert len(empty_scene) == 1

    def test_iteration_is_insertion_order(self, empty_scene):
        for item_id in ["c", "a", "b"]:
            empty_scene.add_item(SceneItem(id=item_id))
        assert [item.id for item in empty_scene] == ["c", "a", "b"]

    def test_get_unknown_raises(self, empty_scene):
        with pytest.raises(KeyError):
            empty_scene.get_item("missing")

    def test_focus(self, empty_scene):
        empty_scene.add_item(SceneItem(id="a"))
        assert empty_scene.focus_item is None

        empty_scene.set_focus("a")
        assert empty_scene.focus_item.id == "a"

        empty_scene.clear_focus()
        assert empty_scene.focus_item is None

    def test_focus_unknown_raises(self, empty_scene):
        with pytest.raises(KeyError):
            empty_scene.set_focus("missing")

    def test_selection(self, empty_scene):
        for item_id in ["a", "b", "c"]:
            empty_scene.add_item(SceneItem(id=item_id))
        empty_scene.select("c")
        empty_scene.select("a")

        assert empty_scene.is_selected("a")
        assert not empty_scene.is_selected("b")
        assert [item.id for item in empty_scene.selected_items()] == ["a", "c"]

        empty_scene.deselect("a")
        assert [item.id for item in empty_scene.selected_items()] == ["c"]

        empty_scene.clear_selection()
        assert empty_scene.selected_items() == []

    def test_select_unknown_raises(self, empty_scene):
        with pytest.raises(KeyError):
            empty_scene.select("missing")

    def test_remove_drops_focus_and_selection(self, cross_scene):
        cross_scene.remove_item("center")
        assert "center" not in cross_scene
        assert cross_scene.focus_id is None
        assert not cross_scene.is_selected("center")

    def test_move_item(self, cross_scene):
        cross_scene.move_item("right", 5, -5)
        item = cross_scene.get_item("right")
        assert (item.x, item.y) == (105, -5)
        assert math.isclose(item.position.distance_to(Position(100, 0)), math.sqrt(50))
