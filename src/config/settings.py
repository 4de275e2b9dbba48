"""
Settings management for Pet Gallery.
Handles loading, saving, and managing application settings.
"""

import json
import os
import traceback
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional

from constants import (
    CONFIG_FILE,
    API_BASE_URL,
    REQUEST_TIMEOUT,
    WEB_COMPANION_PORT,
)

VIEW_TYPES = ("grid", "list")
THEME_OPTIONS = ("light", "dark", "system")


@dataclass
class Settings:
    """Application settings with default values."""

    api_base_url: str = API_BASE_URL
    request_timeout: float = REQUEST_TIMEOUT
    pictures_dir: str = ""  # Empty = platform Pictures directory
    view_type: str = "grid"  # "grid" or "list"
    theme: str = "system"  # "light", "dark" or "system"
    filter_uploads: bool = False  # Re-apply search filter to uploaded images
    enable_thumbnails: bool = True
    web_companion_enabled: bool = False
    web_companion_port: int = WEB_COMPANION_PORT

    def __post_init__(self):
        """Fall back to defaults for out-of-range choices."""
        if self.view_type not in VIEW_TYPES:
            self.view_type = "grid"
        if self.theme not in THEME_OPTIONS:
            self.theme = "system"

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create Settings from dictionary."""
        # Filter out unknown keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)


def get_default_settings() -> Dict[str, Any]:
    """Get default settings as a dictionary."""
    return Settings().to_dict()


def load_settings(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from config file.

    Args:
        config_file: Optional override of the config file path

    Returns:
        Dictionary of settings with defaults for missing values
    """
    path = config_file or CONFIG_FILE
    default_settings = get_default_settings()

    try:
        if os.path.exists(path):
            with open(path, "r") as f:
                loaded_settings = json.load(f)
            # Merge with defaults to handle new settings
            merged = Settings.from_dict({**default_settings, **loaded_settings})
            return merged.to_dict()
        # Create config file with defaults
        save_settings(default_settings, path)
    except (OSError, ValueError, TypeError) as e:
        from utils.logging import log_error

        log_error(
            "Failed to load settings, using defaults",
            type(e).__name__,
            traceback.format_exc(),
        )

    return default_settings


def save_settings(
    settings_to_save: Dict[str, Any], config_file: Optional[str] = None
) -> bool:
    """
    Save settings to config file.

    Args:
        settings_to_save: Dictionary of settings to save
        config_file: Optional override of the config file path

    Returns:
        True if successful, False otherwise
    """
    path = config_file or CONFIG_FILE
    try:
        # Create directory if it doesn't exist
        config_dir = os.path.dirname(path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(path, "w") as f:
            json.dump(settings_to_save, f, indent=2)
        return True
    except (OSError, TypeError) as e:
        from utils.logging import log_error

        log_error("Failed to save settings", type(e).__name__, traceback.format_exc())
        return False


def next_theme(current: str) -> str:
    """Cycle light -> dark -> system -> light."""
    try:
        index = THEME_OPTIONS.index(current)
    except ValueError:
        return THEME_OPTIONS[0]
    return THEME_OPTIONS[(index + 1) % len(THEME_OPTIONS)]


def next_view_type(current: str) -> str:
    """Toggle between the grid and list front ends."""
    return "list" if current == "grid" else "grid"
