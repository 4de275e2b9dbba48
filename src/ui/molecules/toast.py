"""
Toast molecule - Transient message at the bottom of the screen.
"""

import pygame
from typing import Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text


class Toast:
    """Pill-shaped notification used for save results."""

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self, screen: pygame.Surface, message: str, is_error: bool = False
    ) -> Optional[pygame.Rect]:
        """
        Render a toast near the bottom edge.

        Returns:
            Toast rect, or None when there is nothing to show
        """
        if not message:
            return None

        max_width = screen.get_width() - self.theme.padding_lg * 4
        text_w, text_h = self.text.measure(message, self.theme.font_size_sm)
        width = min(text_w, max_width) + self.theme.padding_md * 2
        height = text_h + self.theme.padding_sm * 2

        rect = pygame.Rect(0, 0, width, height)
        rect.centerx = screen.get_width() // 2
        rect.bottom = screen.get_height() - self.theme.padding_lg

        color = self.theme.error if is_error else self.theme.surface_selected
        pygame.draw.rect(screen, color, rect, border_radius=height // 2)
        self.text.render(
            screen,
            message,
            (rect.centerx, rect.top + self.theme.padding_sm),
            color=self.theme.text_primary,
            size=self.theme.font_size_sm,
            max_width=max_width,
            align="center",
        )
        return rect


# Default instance
toast = Toast()
