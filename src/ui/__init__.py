"""
UI components for Pet Gallery.
Follows Atomic Design methodology: atoms -> molecules -> organisms -> templates -> screens.
"""

from .theme import Theme, LIGHT_THEME, DARK_THEME, resolve_theme

__all__ = ["Theme", "LIGHT_THEME", "DARK_THEME", "resolve_theme"]
