"""
Image list organism - Scrollable list of pet pictures.
"""

import pygame
from typing import Callable, List, Optional, Sequence, Tuple

from state import PetImage
from ui.theme import Theme, default_theme
from ui.molecules.image_row import ImageRow


class ImageList:
    """
    Image list organism.

    One row per image, scrolled so the highlighted row keeps a little
    context above and below it.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.image_row = ImageRow(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        images: Sequence[PetImage],
        highlighted: int,
        item_height: int = 80,
        item_spacing: int = 4,
        get_image: Optional[Callable[[PetImage], Optional[pygame.Surface]]] = None,
    ) -> Tuple[List[pygame.Rect], int]:
        """
        Render the list.

        Args:
            screen: Surface to render to
            rect: List area rectangle
            images: Images to show
            highlighted: Currently highlighted index
            item_height: Height of each row
            item_spacing: Gap between rows
            get_image: Function returning a thumbnail surface for an image

        Returns:
            Tuple of (list of item rects, scroll offset)
        """
        if not images:
            return [], 0

        total_item_height = item_height + item_spacing
        visible_count = max(1, rect.height // total_item_height)
        scroll_offset = self._calculate_scroll(highlighted, len(images), visible_count)

        item_rects = []
        y = rect.top
        for i in range(scroll_offset, min(scroll_offset + visible_count, len(images))):
            image = images[i]
            item_rect = pygame.Rect(rect.left, y, rect.width - 8, item_height)
            self.image_row.render(
                screen,
                item_rect,
                image,
                thumbnail=get_image(image) if get_image else None,
                highlighted=(i == highlighted),
            )
            item_rects.append(item_rect)
            y += total_item_height

        self._draw_scrollbar(screen, rect, scroll_offset, len(images), visible_count)

        return item_rects, scroll_offset

    def _calculate_scroll(
        self, highlighted: int, total_items: int, visible_count: int
    ) -> int:
        """Calculate scroll offset to keep highlighted item visible."""
        if total_items <= visible_count:
            return 0

        context = 1
        min_scroll = max(0, highlighted - visible_count + context + 1)
        return min(min_scroll, total_items - visible_count)

    def _draw_scrollbar(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        scroll_offset: int,
        total_items: int,
        visible_count: int,
    ) -> None:
        if total_items <= visible_count:
            return

        bar_height = max(12, rect.height * visible_count // total_items)
        bar_y = rect.top + (rect.height - bar_height) * scroll_offset // (
            total_items - visible_count
        )
        pygame.draw.rect(
            screen,
            self.theme.surface_hover,
            pygame.Rect(rect.right - 4, bar_y, 3, bar_height),
            border_radius=2,
        )


# Default instance
image_list = ImageList()
