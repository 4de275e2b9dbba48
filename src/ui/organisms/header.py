"""
Header organism - Title bar with search field and sort controls.
"""

import pygame
from typing import Dict, Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from ui.molecules.action_button import ActionButton
from ui.molecules.search_bar import SearchBar


class Header:
    """
    Header organism.

    Top row: title, image count and the A-Z / Z-A sort buttons.
    Bottom row: the search field.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)
        self.action_button = ActionButton(theme)
        self.search_bar = SearchBar(theme)

    def render(
        self,
        screen: pygame.Surface,
        title: str,
        query: str,
        search_active: bool,
        sort_ascending: Optional[bool],
        count_text: Optional[str] = None,
        height: int = 96,
    ) -> Dict[str, pygame.Rect]:
        """
        Render the header.

        Args:
            screen: Surface to render to
            title: Screen title
            query: Current search text
            search_active: Whether the search field has focus
            sort_ascending: Current sort order (None = unsorted)
            count_text: Optional text next to the title
            height: Header height

        Returns:
            Dict with "header", "search", "sort_asc" and "sort_desc" rects
        """
        width = screen.get_width()
        pad = self.theme.padding_sm
        header_rect = pygame.Rect(0, 0, width, height)
        pygame.draw.rect(screen, self.theme.surface, header_rect)
        pygame.draw.line(
            screen, self.theme.primary, (0, height - 1), (width, height - 1)
        )

        row_height = (height - pad * 3) // 2

        # Sort buttons, right aligned
        button_width = 64
        desc_rect = pygame.Rect(width - pad - button_width, pad, button_width, row_height)
        asc_rect = desc_rect.move(-(button_width + pad), 0)
        self._render_sort_button(screen, asc_rect, "A-Z", sort_ascending is True)
        self._render_sort_button(screen, desc_rect, "Z-A", sort_ascending is False)

        font_height = self.text.get_font(self.theme.font_size_lg).get_height()
        title_rect = self.text.render(
            screen,
            title,
            (self.theme.padding_md, pad + (row_height - font_height) // 2),
            color=self.theme.text_primary,
            size=self.theme.font_size_lg,
            max_width=asc_rect.left - self.theme.padding_md * 2,
        )
        if count_text:
            self.text.render(
                screen,
                count_text,
                (title_rect.right + self.theme.padding_sm, title_rect.top + 4),
                color=self.theme.text_secondary,
                size=self.theme.font_size_sm,
                max_width=max(0, asc_rect.left - title_rect.right - self.theme.padding_md),
            )

        search_rect = pygame.Rect(
            self.theme.padding_md,
            pad * 2 + row_height,
            width - self.theme.padding_md * 2,
            row_height,
        )
        self.search_bar.render(screen, search_rect, query, active=search_active)

        return {
            "header": header_rect,
            "search": search_rect,
            "sort_asc": asc_rect,
            "sort_desc": desc_rect,
        }

    def _render_sort_button(
        self, screen: pygame.Surface, rect: pygame.Rect, label: str, active: bool
    ):
        if active:
            self.action_button.render(screen, rect, label)
        else:
            self.action_button.render_secondary(screen, rect, label)

    def get_content_area(
        self, screen: pygame.Surface, header_height: int = 96
    ) -> pygame.Rect:
        """
        Get the content area below the header.

        Args:
            screen: Screen surface
            header_height: Height of header

        Returns:
            Content area rect
        """
        pad = self.theme.padding_sm
        return pygame.Rect(
            pad,
            header_height + pad,
            screen.get_width() - pad * 2,
            screen.get_height() - header_height - pad * 2,
        )


# Default instance
header = Header()
