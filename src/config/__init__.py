"""
Configuration management for Pet Gallery.
"""

from .settings import (
    load_settings,
    save_settings,
    get_default_settings,
    next_theme,
    next_view_type,
    Settings,
    THEME_OPTIONS,
    VIEW_TYPES,
)

__all__ = [
    'load_settings',
    'save_settings',
    'get_default_settings',
    'next_theme',
    'next_view_type',
    'Settings',
    'THEME_OPTIONS',
    'VIEW_TYPES',
]
