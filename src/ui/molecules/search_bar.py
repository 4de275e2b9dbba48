"""
Search bar molecule - Inline text field for filtering the gallery.
"""

import time
import pygame
from typing import Optional

from ui.theme import Theme, default_theme
from ui.atoms.button import Button
from ui.atoms.text import Text


class SearchBar:
    """
    Search bar molecule.

    Shows the current query with a blinking cursor while active and a
    hint while empty.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.button = Button(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        query: str,
        active: bool = False,
        placeholder: str = "Search title or description",
        now_ms: Optional[int] = None,
    ) -> pygame.Rect:
        """
        Render the search field.

        Args:
            screen: Surface to render to
            rect: Field rectangle
            query: Current search text
            active: Whether the field has keyboard focus
            placeholder: Hint shown while the query is empty
            now_ms: Clock driving the cursor blink (default: wall clock)

        Returns:
            Field rect
        """
        border = self.theme.primary if active else self.theme.surface_hover
        pygame.draw.rect(
            screen, self.theme.surface, rect, border_radius=self.theme.radius_lg
        )
        pygame.draw.rect(
            screen, border, rect, width=2, border_radius=self.theme.radius_lg
        )

        icon_size = rect.height - self.theme.padding_sm
        icon_center = (rect.left + self.theme.padding_sm + icon_size // 2, rect.centery)
        self.button.render_icon_button(
            screen,
            icon_center,
            icon_size,
            color=self.theme.surface,
            icon_color=self.theme.text_secondary,
            icon_type="search",
        )

        text_x = icon_center[0] + icon_size // 2 + self.theme.padding_sm
        max_width = rect.right - text_x - self.theme.padding_md
        font_height = self.text.get_font(self.theme.font_size_md).get_height()
        text_y = rect.centery - font_height // 2

        if query:
            text_rect = self.text.render(
                screen,
                query,
                (text_x, text_y),
                color=self.theme.text_primary,
                max_width=max_width,
            )
        else:
            text_rect = pygame.Rect(text_x, text_y, 0, font_height)
            if not active:
                self.text.render(
                    screen,
                    placeholder,
                    (text_x, text_y),
                    color=self.theme.text_disabled,
                    max_width=max_width,
                )

        if active:
            if now_ms is None:
                now_ms = int(time.time() * 1000)
            if (now_ms // self.theme.cursor_blink_rate) % 2 == 0:
                cursor_x = text_rect.right + 2
                pygame.draw.line(
                    screen,
                    self.theme.text_primary,
                    (cursor_x, text_y + 2),
                    (cursor_x, text_y + font_height - 2),
                    2,
                )

        return rect


# Default instance
search_bar = SearchBar()
