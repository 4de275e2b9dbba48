"""
Gallery screen template - Header plus content area for the gallery views.
"""

import pygame
from typing import Any, Callable, Dict, List, Tuple

from constants import HEADER_HEIGHT
from state import AppState, Error, Loading, Success
from ui.theme import Theme, default_theme
from ui.organisms.header import Header
from ui.molecules.status_panel import StatusPanel

# Draws the images into the content rect and returns (item_rects, scroll_offset)
ContentRenderer = Callable[[pygame.Surface, pygame.Rect], Tuple[List[pygame.Rect], int]]


class GalleryScreenTemplate:
    """
    Gallery screen template.

    Draws the background and header, then either the loading/error/empty
    panel or the view-specific content.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.header = Header(theme)
        self.status_panel = StatusPanel(theme)

    def render(
        self,
        screen: pygame.Surface,
        state: AppState,
        render_content: ContentRenderer,
        title: str = "Pets",
    ) -> Dict[str, Any]:
        """
        Render the gallery frame.

        Args:
            screen: Surface to render to
            state: Application state
            render_content: Draws the Success images into the content rect
            title: Header title

        Returns:
            Dict of interactive rects plus "item_rects" and "scroll_offset"
        """
        screen.fill(self.theme.background)

        gallery = state.gallery
        count_text = None
        if isinstance(gallery, Success):
            count_text = f"{len(gallery.images)} images"

        rects: Dict[str, Any] = self.header.render(
            screen,
            title,
            query=state.search.text,
            search_active=state.search.active,
            sort_ascending=state.sort_ascending,
            count_text=count_text,
            height=HEADER_HEIGHT,
        )
        content_rect = self.header.get_content_area(screen, HEADER_HEIGHT)
        rects["content"] = content_rect

        item_rects: List[pygame.Rect] = []
        scroll_offset = 0
        if isinstance(gallery, Loading):
            self.status_panel.render_loading(screen, content_rect)
        elif isinstance(gallery, Error):
            self.status_panel.render_error(screen, content_rect, gallery.message)
        elif not gallery.images:
            self.status_panel.render_empty(screen, content_rect, state.search.text)
        else:
            item_rects, scroll_offset = render_content(screen, content_rect)

        rects["item_rects"] = item_rects
        rects["scroll_offset"] = scroll_offset
        return rects


# Default instance
gallery_screen_template = GalleryScreenTemplate()
