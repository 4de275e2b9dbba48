"""
Action button molecule - Button with label.
"""

import pygame
from typing import Optional

from ui.theme import Theme, Color, default_theme
from ui.atoms.button import Button
from ui.atoms.text import Text


class ActionButton:
    """
    Action button molecule.

    Combines a button with a centered text label.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.button = Button(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        color: Optional[Color] = None,
        text_color: Optional[Color] = None,
        hover: bool = False,
    ) -> pygame.Rect:
        """
        Render an action button.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            label: Button label
            color: Background color (default: primary)
            text_color: Text color (default: background, for contrast)
            hover: Focused/hover state

        Returns:
            Button rect
        """
        if color is None:
            color = self.theme.primary
        if text_color is None:
            text_color = self.theme.background

        self.button.render(
            screen,
            rect,
            color=color,
            hover=hover,
            border_color=self.theme.text_primary if hover else None,
            border_width=2 if hover else 0,
        )

        font_height = self.text.get_font(self.theme.font_size_md).get_height()
        self.text.render(
            screen,
            label,
            (rect.centerx, rect.centery - font_height // 2),
            color=text_color,
            size=self.theme.font_size_md,
            max_width=rect.width - self.theme.padding_sm * 2,
            align="center",
        )
        return rect

    def render_secondary(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        hover: bool = False,
    ) -> pygame.Rect:
        """Render a secondary (neutral) style button."""
        return self.render(
            screen,
            rect,
            label,
            color=self.theme.surface_hover,
            text_color=self.theme.text_primary,
            hover=hover,
        )


# Default instance
action_button = ActionButton()
