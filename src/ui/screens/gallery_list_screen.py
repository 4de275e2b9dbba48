"""
Gallery list screen - One row per image.
"""

import pygame
from typing import Any, Callable, Dict, Optional

from constants import LIST_ITEM_HEIGHT
from state import AppState, PetImage
from ui.theme import Theme, default_theme
from ui.templates.gallery_screen import GalleryScreenTemplate
from ui.organisms.image_list import ImageList

ThumbnailGetter = Callable[[PetImage], Optional[pygame.Surface]]


class GalleryListScreen:
    """List presentation of the gallery."""

    view_type = "list"

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.template = GalleryScreenTemplate(theme)
        self.image_list = ImageList(theme)

    def render(
        self,
        screen: pygame.Surface,
        state: AppState,
        get_thumbnail: Optional[ThumbnailGetter] = None,
    ) -> Dict[str, Any]:
        images = state.images

        def render_content(surface, rect):
            return self.image_list.render(
                surface,
                rect,
                images,
                state.highlighted,
                item_height=LIST_ITEM_HEIGHT,
                get_image=get_thumbnail,
            )

        return self.template.render(screen, state, render_content)

    def move_highlight(self, state: AppState, direction: str) -> int:
        """Up/down moves one row; left/right are ignored."""
        count = len(state.images)
        if not count:
            return 0
        step = {"up": -1, "down": 1}.get(direction, 0)
        target = state.highlighted + step
        if 0 <= target < count:
            state.highlighted = target
        return state.highlighted


# Default instance
gallery_list_screen = GalleryListScreen()
