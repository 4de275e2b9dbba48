"""
Grid organism - Grid layout of pet thumbnails.
"""

import pygame
from typing import Callable, List, Optional, Sequence, Tuple

from state import PetImage
from ui.theme import Theme, default_theme
from ui.molecules.thumbnail import Thumbnail


class Grid:
    """
    Grid organism.

    Displays images in rows of thumbnails with their titles, scrolled
    so the highlighted cell stays visible.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.thumbnail = Thumbnail(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        images: Sequence[PetImage],
        highlighted: int,
        columns: int = 3,
        get_image: Optional[Callable[[PetImage], Optional[pygame.Surface]]] = None,
    ) -> Tuple[List[pygame.Rect], int]:
        """
        Render a grid of images.

        Args:
            screen: Surface to render to
            rect: Grid area rectangle
            images: Images to show
            highlighted: Currently highlighted index
            columns: Number of columns
            get_image: Function returning a thumbnail surface for an image

        Returns:
            Tuple of (list of item rects, index of the first visible item)
        """
        if not images:
            return [], 0

        padding = self.theme.padding_sm
        available_width = rect.width - padding * 2
        cell_width = (available_width - padding * (columns - 1)) // columns
        cell_height = cell_width + self.theme.font_size_sm + padding

        rows = (len(images) + columns - 1) // columns
        visible_rows = max(1, rect.height // (cell_height + padding))

        scroll_row = self._calculate_scroll_row(
            highlighted // columns, rows, visible_rows
        )

        item_rects = []
        start_idx = scroll_row * columns

        y = rect.top + padding
        for row in range(visible_rows + 1):
            if y >= rect.bottom - padding:
                break

            x = rect.left + padding
            for col in range(columns):
                idx = start_idx + row * columns + col
                if idx >= len(images):
                    break

                image = images[idx]
                cell_rect = pygame.Rect(x, y, cell_width, cell_height)
                self.thumbnail.render_with_label(
                    screen,
                    cell_rect,
                    label=image.title or "Untitled",
                    image=get_image(image) if get_image else None,
                    highlighted=(idx == highlighted),
                )
                item_rects.append(cell_rect)
                x += cell_width + padding

            y += cell_height + padding

        self._draw_scroll_indicators(screen, rect, scroll_row, rows, visible_rows)

        return item_rects, start_idx

    def _calculate_scroll_row(
        self, highlighted_row: int, total_rows: int, visible_rows: int
    ) -> int:
        """Calculate scroll row to keep highlighted row visible."""
        if total_rows <= visible_rows:
            return 0
        return max(0, min(highlighted_row - visible_rows + 1, total_rows - visible_rows))

    def _draw_scroll_indicators(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        scroll_row: int,
        total_rows: int,
        visible_rows: int,
    ) -> None:
        if total_rows <= visible_rows:
            return

        size = 8
        center_x = rect.centerx

        if scroll_row > 0:
            points = [
                (center_x - size, rect.top + size),
                (center_x, rect.top + 2),
                (center_x + size, rect.top + size),
            ]
            pygame.draw.polygon(screen, self.theme.text_secondary, points)

        if scroll_row + visible_rows < total_rows:
            points = [
                (center_x - size, rect.bottom - size),
                (center_x, rect.bottom - 2),
                (center_x + size, rect.bottom - size),
            ]
            pygame.draw.polygon(screen, self.theme.text_secondary, points)


# Default instance
grid = Grid()
