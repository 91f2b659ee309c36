"""Services package."""

from .navigation import (
    find_next,
    get_closest,
    get_distance,
    get_loose_search_function,
    get_non_selected_non_focus_items,
    get_strict_search_function,
    look,
)
from .keyboard_controller import (
    KeyboardController,
    DEFAULT_MOVE_STEP,
    DEFAULT_RANDOM_SEED,
)
from .settings_manager import (
    SettingsManager,
    AppSettings,
    NavigationSettings,
    DemoSettings,
    UISettings,
    get_settings,
    reset_settings_manager,
)
from .version_info import get_version, get_version_history

__all__ = [
    # Directional navigation
    "find_next",
    "get_closest",
    "get_distance",
    "get_loose_search_function",
    "get_non_selected_non_focus_items",
    "get_strict_search_function",
    "look",
    # Keyboard commands
    "KeyboardController",
    "DEFAULT_MOVE_STEP",
    "DEFAULT_RANDOM_SEED",
    # Settings
    "SettingsManager",
    "AppSettings",
    "NavigationSettings",
    "DemoSettings",
    "UISettings",
    "get_settings",
    "reset_settings_manager",
    # Version
    "get_version",
    "get_version_history",
]
