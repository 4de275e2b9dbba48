"""
Gallery grid screen - Thumbnails in a grid.
"""

import pygame
from typing import Any, Callable, Dict, Optional

from constants import GRID_COLUMNS
from state import AppState, PetImage
from ui.theme import Theme, default_theme
from ui.templates.gallery_screen import GalleryScreenTemplate
from ui.organisms.grid import Grid

ThumbnailGetter = Callable[[PetImage], Optional[pygame.Surface]]


class GalleryGridScreen:
    """
    Grid presentation of the gallery.
    """

    view_type = "grid"

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.template = GalleryScreenTemplate(theme)
        self.grid = Grid(theme)

    def render(
        self,
        screen: pygame.Surface,
        state: AppState,
        get_thumbnail: Optional[ThumbnailGetter] = None,
    ) -> Dict[str, Any]:
        """
        Render the grid screen.

        Args:
            screen: Surface to render to
            state: Application state
            get_thumbnail: Function returning a loaded thumbnail, or None

        Returns:
            Dict of interactive rects
        """
        images = state.images

        def render_content(surface, rect):
            return self.grid.render(
                surface,
                rect,
                images,
                state.highlighted,
                columns=GRID_COLUMNS,
                get_image=get_thumbnail,
            )

        return self.template.render(screen, state, render_content)

    def move_highlight(self, state: AppState, direction: str) -> int:
        """Arrow-key navigation across rows and columns."""
        count = len(state.images)
        if not count:
            return 0
        step = {"left": -1, "right": 1, "up": -GRID_COLUMNS, "down": GRID_COLUMNS}
        target = state.highlighted + step.get(direction, 0)
        if 0 <= target < count:
            state.highlighted = target
        return state.highlighted


# Default instance
gallery_grid_screen = GalleryGridScreen()
