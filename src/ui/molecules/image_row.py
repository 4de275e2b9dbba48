"""
Image row molecule - One pet picture in the list view.
"""

import pygame
from typing import Optional

from state import PetImage
from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from ui.molecules.thumbnail import Thumbnail, get_initials


class ImageRow:
    """
    Row with a small thumbnail, the title, and the description below it.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)
        self.thumbnail = Thumbnail(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        image: PetImage,
        thumbnail: Optional[pygame.Surface] = None,
        highlighted: bool = False,
    ) -> pygame.Rect:
        """
        Render a list row.

        Args:
            screen: Surface to render to
            rect: Row rectangle
            image: Image to describe
            thumbnail: Loaded thumbnail surface, if any
            highlighted: Highlight state

        Returns:
            Row rect
        """
        bg = self.theme.surface_selected if highlighted else self.theme.surface
        pygame.draw.rect(screen, bg, rect, border_radius=self.theme.radius_md)

        pad = self.theme.padding_sm
        thumb_size = rect.height - pad * 2
        thumb_rect = pygame.Rect(rect.left + pad, rect.top + pad, thumb_size, thumb_size)
        self.thumbnail.render(
            screen,
            thumb_rect,
            image=thumbnail,
            placeholder_text=get_initials(image.title),
        )

        text_x = thumb_rect.right + self.theme.padding_md
        max_width = rect.right - text_x - pad
        title_rect = self.text.render(
            screen,
            image.title or "Untitled",
            (text_x, rect.top + pad),
            color=self.theme.text_primary,
            max_width=max_width,
        )
        if image.description:
            self.text.render(
                screen,
                image.description,
                (text_x, title_rect.bottom + self.theme.padding_xs),
                color=self.theme.text_secondary,
                size=self.theme.font_size_sm,
                max_width=max_width,
            )

        return rect


# Default instance
image_row = ImageRow()
