"""
Status panel molecule - Loading, error and empty states of the gallery.
"""

import pygame
from typing import Optional

from ui.theme import Theme, default_theme
from ui.atoms.spinner import Spinner
from ui.atoms.text import Text


class StatusPanel:
    """
    Centered panel shown in place of the image area.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.spinner = Spinner(theme)
        self.text = Text(theme)

    def render_loading(self, screen: pygame.Surface, rect: pygame.Rect) -> pygame.Rect:
        """Spinner with a caption."""
        center = (rect.centerx, rect.centery - self.theme.padding_lg)
        self.spinner.render(screen, center)
        self.text.render(
            screen,
            "Loading pets...",
            (rect.centerx, center[1] + 40),
            color=self.theme.text_secondary,
            align="center",
        )
        return rect

    def render_error(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        message: str,
        hint: Optional[str] = "Press R to retry",
    ) -> pygame.Rect:
        """Error message wrapped to the panel width."""
        max_width = rect.width - self.theme.padding_lg * 2
        lines = self.text.wrap(message, max_width)
        line_height = self.text.get_font(self.theme.font_size_md).get_linesize()
        y = rect.centery - (len(lines) * line_height) // 2 - self.theme.padding_md

        body = self.text.render_multiline(
            screen,
            message,
            (rect.centerx, y),
            color=self.theme.error,
            max_width=max_width,
            align="center",
        )
        if hint:
            self.text.render(
                screen,
                hint,
                (rect.centerx, body.bottom + self.theme.padding_md),
                color=self.theme.text_secondary,
                size=self.theme.font_size_sm,
                align="center",
            )
        return rect

    def render_empty(
        self, screen: pygame.Surface, rect: pygame.Rect, query: str = ""
    ) -> pygame.Rect:
        message = f'No pets match "{query}"' if query else "No pets to show"
        self.text.render(
            screen,
            message,
            (rect.centerx, rect.centery),
            color=self.theme.text_secondary,
            max_width=rect.width - self.theme.padding_lg * 2,
            align="center",
        )
        return rect


# Default instance
status_panel = StatusPanel()
