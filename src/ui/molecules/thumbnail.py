"""
Thumbnail molecule - Pet picture with placeholder and border.
"""

import pygame
from typing import Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text


class Thumbnail:
    """
    Thumbnail molecule.

    Displays a pet picture, or the title's initials while the picture
    is still downloading or failed to load.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        image: Optional[pygame.Surface] = None,
        placeholder_text: str = "?",
        highlighted: bool = False,
    ) -> pygame.Rect:
        """
        Render a thumbnail.

        Args:
            screen: Surface to render to
            rect: Thumbnail rectangle
            image: Image surface to display
            placeholder_text: Text when no image is available
            highlighted: Draw the highlight border

        Returns:
            Thumbnail rect
        """
        radius = self.theme.radius_md
        bg_color = self.theme.surface_hover if highlighted else self.theme.surface
        pygame.draw.rect(screen, bg_color, rect, border_radius=radius)

        if image is not None:
            # Fit inside the rect, keeping the aspect ratio
            img_w, img_h = image.get_size()
            scale = min(rect.width / max(img_w, 1), rect.height / max(img_h, 1))
            target = (max(1, int(img_w * scale)), max(1, int(img_h * scale)))
            if target != (img_w, img_h):
                image = pygame.transform.smoothscale(image, target)
            screen.blit(image, image.get_rect(center=rect.center))
        else:
            font_height = self.text.get_font(self.theme.font_size_lg).get_height()
            self.text.render(
                screen,
                placeholder_text,
                (rect.centerx, rect.centery - font_height // 2),
                color=self.theme.text_disabled,
                size=self.theme.font_size_lg,
                align="center",
            )

        if highlighted:
            pygame.draw.rect(
                screen, self.theme.primary, rect, width=3, border_radius=radius
            )

        return rect

    def render_with_label(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        image: Optional[pygame.Surface] = None,
        highlighted: bool = False,
    ) -> pygame.Rect:
        """
        Render a thumbnail with the title below.

        Returns:
            Total rect
        """
        label_height = self.theme.font_size_sm + self.theme.padding_xs
        thumb_rect = pygame.Rect(
            rect.left, rect.top, rect.width, rect.height - label_height
        )

        self.render(
            screen,
            thumb_rect,
            image=image,
            placeholder_text=get_initials(label),
            highlighted=highlighted,
        )

        self.text.render(
            screen,
            label,
            (rect.centerx, thumb_rect.bottom + self.theme.padding_xs),
            color=self.theme.text_primary if highlighted else self.theme.text_secondary,
            size=self.theme.font_size_sm,
            max_width=rect.width,
            align="center",
        )

        return rect


def get_initials(title: str, max_chars: int = 2) -> str:
    """
    First letters of the title's words, for placeholders.

    Args:
        title: Image title
        max_chars: Maximum initials to return

    Returns:
        Upper-cased initials, or "?" when the title has none
    """
    initials = ""
    for word in title.replace("_", " ").replace("-", " ").split():
        for char in word:
            if char.isalnum():
                initials += char.upper()
                break
        if len(initials) >= max_chars:
            break
    return initials or "?"


# Default instance
thumbnail = Thumbnail()
