"""
Modal frame organism - Modal dialog container.
"""

import pygame
from typing import Tuple, Optional

from ui.theme import Theme, default_theme
from ui.atoms.text import Text
from ui.atoms.button import Button


class ModalFrame:
    """
    Modal frame organism.

    Provides a centered dialog container with backdrop, title bar and
    close button.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)
        self.button = Button(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        title: Optional[str] = None,
        show_close: bool = True,
    ) -> Tuple[pygame.Rect, pygame.Rect, Optional[pygame.Rect]]:
        """
        Render a modal frame.

        Args:
            screen: Surface to render to
            rect: Modal rectangle
            title: Optional title
            show_close: Show close button

        Returns:
            Tuple of (modal_rect, content_rect, close_button_rect or None)
        """
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(self.theme.overlay)
        screen.blit(overlay, (0, 0))

        radius = self.theme.radius_lg
        pygame.draw.rect(screen, self.theme.surface, rect, border_radius=radius)

        header_height = 50 if title else 0
        padding = self.theme.padding_lg

        content_rect = pygame.Rect(
            rect.left + padding,
            rect.top + header_height + padding,
            rect.width - padding * 2,
            rect.height - header_height - padding * 2,
        )

        close_button_rect = None

        if title:
            header_rect = pygame.Rect(rect.left, rect.top, rect.width, header_height)
            pygame.draw.rect(
                screen,
                self.theme.surface_hover,
                header_rect,
                border_top_left_radius=radius,
                border_top_right_radius=radius,
            )

            font_height = self.text.get_font(self.theme.font_size_lg).get_height()
            self.text.render(
                screen,
                title,
                (rect.left + padding, rect.top + (header_height - font_height) // 2),
                color=self.theme.text_primary,
                size=self.theme.font_size_lg,
                max_width=rect.width - padding * 2 - 40,
            )

            if show_close:
                close_size = 30
                close_button_rect = pygame.Rect(
                    rect.right - padding - close_size,
                    rect.top + (header_height - close_size) // 2,
                    close_size,
                    close_size,
                )
                self.button.render_icon_button(
                    screen, close_button_rect.center, close_size, icon_type="close"
                )

        return rect, content_rect, close_button_rect

    def render_centered(
        self,
        screen: pygame.Surface,
        width: int,
        height: int,
        title: Optional[str] = None,
        show_close: bool = True,
    ) -> Tuple[pygame.Rect, pygame.Rect, Optional[pygame.Rect]]:
        """
        Render a modal centered on the screen.

        Returns:
            Tuple of (modal_rect, content_rect, close_button_rect or None)
        """
        screen_rect = screen.get_rect()
        modal_rect = pygame.Rect(
            (screen_rect.width - width) // 2,
            (screen_rect.height - height) // 2,
            width,
            height,
        )
        return self.render(screen, modal_rect, title, show_close)


# Default instance
modal_frame = ModalFrame()
