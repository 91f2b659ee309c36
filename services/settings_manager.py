"""
Settings Manager.

Handles application settings with JSON file storage.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from typing import Optional
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class NavigationSettings:
    """Keyboard navigation parameters."""
    move_step: float = 10.0      # Scene units moved per Ctrl+Arrow
    random_seed: int = 0         # Seed for Space / Ctrl+Space choices


@dataclass
class DemoSettings:
    """Demo dialog parameters."""
    item_count: int = 12
    scene_width: float = 600.0
    scene_height: float = 400.0
    virtual_bastard_interval_ms: int = 100
    virtual_bastard_on_start: bool = False


@dataclass
class UISettings:
    """User interface settings."""
    verbose: bool = False
    show_grid: bool = True
    grid_size: int = 50


@dataclass
class AppSettings:
    """Complete application settings."""
    navigation: NavigationSettings = field(default_factory=NavigationSettings)
    demo: DemoSettings = field(default_factory=DemoSettings)
    ui: UISettings = field(default_factory=UISettings)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "navigation": asdict(self.navigation),
            "demo": asdict(self.demo),
            "ui": asdict(self.ui),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary."""
        settings = cls()

        if "navigation" in data:
            settings.navigation = NavigationSettings(**data["navigation"])
        if "demo" in data:
            settings.demo = DemoSettings(**data["demo"])
        if "ui" in data:
            settings.ui = UISettings(**data["ui"])

        return settings


class SettingsManager:
    """
    Manages application settings with JSON file storage.

    Settings file location:
    - Windows: %APPDATA%/KeyboardFriendlyView/settings.json
    - Linux: ~/.config/KeyboardFriendlyView/settings.json
    - macOS: ~/Library/Application Support/KeyboardFriendlyView/settings.json
    """

    APP_NAME = "KeyboardFriendlyView"
    SETTINGS_FILE = "settings.json"

    def __init__(self, config_override: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            config_override: Optional path to override config file location.
                            Useful for testing.
        """
        self._settings = AppSettings()
        self._config_override = config_override
        self._settings_path = self._get_settings_path()
        self._ensure_settings_dir()
        self.load()

    @property
    def settings(self) -> AppSettings:
        """Get current settings."""
        return self._settings

    @property
    def settings_path(self) -> str:
        """Get the settings file path."""
        return str(self._settings_path)

    # Convenience properties for common settings
    @property
    def navigation(self) -> NavigationSettings:
        return self._settings.navigation

    @property
    def demo(self) -> DemoSettings:
        return self._settings.demo

    @property
    def verbose(self) -> bool:
        return self._settings.ui.verbose

    @verbose.setter
    def verbose(self, value: bool):
        self._settings.ui.verbose = value
        self.save()

    def _get_settings_path(self) -> Path:
        """Get platform-specific settings directory."""
        if self._config_override:
            return Path(self._config_override)

        import platform
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            config_dir = Path(base) / self.APP_NAME
        elif system == "Darwin":  # macOS
            config_dir = Path.home() / "Library" / "Application Support" / self.APP_NAME
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / self.APP_NAME

        return config_dir / self.SETTINGS_FILE

    def _ensure_settings_dir(self):
        """Create settings directory if it doesn't exist."""
        self._settings_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> bool:
        """Load settings from file."""
        if not self._settings_path.exists():
            return False

        try:
            with open(self._settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = AppSettings.from_dict(data)
            return True
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Error loading settings from {self._settings_path}: {e}")
            return False

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._ensure_settings_dir()
            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.warning(f"Error saving settings to {self._settings_path}: {e}")
            return False

    def reset(self):
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self.save()


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings(config_override: Optional[str] = None) -> SettingsManager:
    """
    Get the global settings manager instance.

    Args:
        config_override: Optional path to override config location.
                        Only used on first call to initialize.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager(config_override)
    return _settings_manager


def reset_settings_manager():
    """Reset the global settings manager (useful for testing)."""
    global _settings_manager
    _settings_manager = None
