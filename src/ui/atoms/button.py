"""
Button atom - Basic button shape rendering.
"""

import pygame
from typing import Tuple, Optional

from ui.theme import Theme, Color, default_theme


class Button:
    """
    Basic button rendering atom.

    Renders rounded button shapes and small circular icon buttons.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        border_radius: Optional[int] = None,
        shadow: bool = True,
        border_color: Optional[Color] = None,
        border_width: int = 0,
        hover: bool = False,
    ) -> pygame.Rect:
        """
        Render a button shape.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            color: Fill color (default: primary)
            border_radius: Corner radius (default: theme.radius_md)
            shadow: Draw shadow
            border_color: Border color (optional)
            border_width: Border width
            hover: Apply hover effect

        Returns:
            Button rect
        """
        if color is None:
            color = self.theme.primary
        if border_radius is None:
            border_radius = self.theme.radius_md

        if hover:
            color = self._lighten(color, 0.15)

        if shadow:
            shadow_surface = pygame.Surface(rect.size, pygame.SRCALPHA)
            pygame.draw.rect(
                shadow_surface,
                self.theme.shadow,
                shadow_surface.get_rect(),
                border_radius=border_radius,
            )
            screen.blit(shadow_surface, (rect.left, rect.top + 2))

        pygame.draw.rect(screen, color, rect, border_radius=border_radius)

        if border_color and border_width > 0:
            pygame.draw.rect(
                screen,
                border_color,
                rect,
                width=border_width,
                border_radius=border_radius,
            )

        return rect

    def render_icon_button(
        self,
        screen: pygame.Surface,
        center: Tuple[int, int],
        size: int,
        color: Optional[Color] = None,
        icon_color: Optional[Color] = None,
        icon_type: str = "close",  # "close", "search", "sort_asc", "sort_desc"
        hover: bool = False,
    ) -> pygame.Rect:
        """
        Render a circular icon button.

        Returns:
            Button rect
        """
        if color is None:
            color = self.theme.surface_hover
        if icon_color is None:
            icon_color = self.theme.text_primary
        if hover:
            color = self._lighten(color, 0.15)

        rect = pygame.Rect(0, 0, size, size)
        rect.center = center
        pygame.draw.circle(screen, color, center, size // 2)
        self._draw_icon(screen, center, size // 2, icon_color, icon_type)
        return rect

    def _draw_icon(
        self,
        screen: pygame.Surface,
        center: Tuple[int, int],
        radius: int,
        color: Color,
        icon_type: str,
    ) -> None:
        """Draw an icon inside a button."""
        cx, cy = center
        icon_size = int(radius * 0.5)

        if icon_type == "close":
            pygame.draw.line(
                screen,
                color,
                (cx - icon_size, cy - icon_size),
                (cx + icon_size, cy + icon_size),
                2,
            )
            pygame.draw.line(
                screen,
                color,
                (cx + icon_size, cy - icon_size),
                (cx - icon_size, cy + icon_size),
                2,
            )

        elif icon_type == "search":
            pygame.draw.circle(
                screen,
                color,
                (cx - icon_size // 4, cy - icon_size // 4),
                icon_size // 2 + 1,
                2,
            )
            pygame.draw.line(
                screen,
                color,
                (cx + icon_size // 4, cy + icon_size // 4),
                (cx + icon_size, cy + icon_size),
                2,
            )

        elif icon_type in ("sort_asc", "sort_desc"):
            # Arrow pointing in the sort direction
            tip = -icon_size if icon_type == "sort_asc" else icon_size
            pygame.draw.line(screen, color, (cx, cy - tip), (cx, cy + tip), 2)
            points = [
                (cx - icon_size // 2, cy + tip // 2),
                (cx, cy + tip),
                (cx + icon_size // 2, cy + tip // 2),
            ]
            pygame.draw.lines(screen, color, False, points, 2)

    def _lighten(self, color: Color, amount: float) -> Color:
        """Lighten a color by a percentage."""
        return tuple(min(255, int(c + (255 - c) * amount)) for c in color)


# Default instance
button = Button()
