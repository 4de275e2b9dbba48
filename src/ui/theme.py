"""
Theme and design tokens for Pet Gallery.
Centralizes all visual constants for consistent styling.
"""

import os
from dataclasses import dataclass
from typing import Tuple, Optional

# Type alias for colors
Color = Tuple[int, int, int]
ColorAlpha = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Theme:
    """
    Design tokens for the application UI.

    This class is immutable to prevent accidental modifications; light
    and dark variants are separate instances.
    """

    name: str = "dark"

    # ---- Base Colors ---- #
    background: Color = (24, 24, 28)
    surface: Color = (40, 40, 46)
    surface_hover: Color = (56, 56, 64)
    surface_selected: Color = (70, 64, 110)

    # ---- Accents ---- #
    primary: Color = (160, 140, 255)
    primary_light: Color = (200, 188, 255)
    primary_dark: Color = (110, 95, 200)
    secondary: Color = (255, 190, 90)

    # ---- Text Colors ---- #
    text_primary: Color = (236, 236, 240)
    text_secondary: Color = (170, 170, 180)
    text_disabled: Color = (100, 100, 110)

    # ---- Status Colors ---- #
    warning: Color = (255, 190, 90)
    error: Color = (240, 80, 80)
    success: Color = (90, 200, 120)

    # ---- Effects ---- #
    shadow: ColorAlpha = (0, 0, 0, 120)
    overlay: ColorAlpha = (0, 0, 0, 160)

    # ---- Spacing ---- #
    padding_xs: int = 4
    padding_sm: int = 8
    padding_md: int = 16
    padding_lg: int = 24

    # ---- Typography ---- #
    font_size_sm: int = 18
    font_size_md: int = 24
    font_size_lg: int = 32
    font_path: Optional[str] = None  # pygame default font

    # ---- Component Sizes ---- #
    radius_sm: int = 4
    radius_md: int = 6
    radius_lg: int = 10
    button_height: int = 40
    cursor_blink_rate: int = 500  # ms


LIGHT_THEME = Theme(
    name="light",
    background=(246, 246, 250),
    surface=(255, 255, 255),
    surface_hover=(232, 230, 245),
    surface_selected=(214, 206, 255),
    primary=(98, 70, 220),
    primary_light=(150, 130, 240),
    primary_dark=(70, 50, 170),
    secondary=(210, 120, 20),
    text_primary=(28, 28, 34),
    text_secondary=(90, 90, 100),
    text_disabled=(170, 170, 180),
    warning=(210, 120, 20),
    error=(200, 40, 40),
    success=(30, 140, 70),
    shadow=(0, 0, 0, 40),
    overlay=(0, 0, 0, 110),
)

DARK_THEME = Theme()


def resolve_theme(preference: str) -> Theme:
    """
    Pick the theme for a stored preference.

    "system" follows PETS_GALLERY_DARK (set by the launcher from the OS
    night mode) and falls back to dark.
    """
    if preference == "light":
        return LIGHT_THEME
    if preference == "dark":
        return DARK_THEME
    system_dark = os.environ.get("PETS_GALLERY_DARK", "1").lower() not in ("0", "false")
    return DARK_THEME if system_dark else LIGHT_THEME


# Default theme instance
default_theme = DARK_THEME
