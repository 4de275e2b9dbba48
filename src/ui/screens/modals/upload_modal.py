"""
Upload modal - Form for adding a picture to the gallery.
"""

from typing import List, Optional, Tuple

import pygame

from state import UploadModalState
from ui.theme import Theme, default_theme
from ui.organisms.modal_frame import ModalFrame
from ui.molecules.action_button import ActionButton
from ui.atoms.text import Text

FIELD_LABELS = {
    "url": "Image URL or file path",
    "title": "Title",
    "description": "Description",
}


class UploadModal:
    """
    Upload modal.

    Three labelled text fields, the focused one outlined, with Add and
    Cancel buttons below and a validation message when needed.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_frame = ModalFrame(theme)
        self.action_button = ActionButton(theme)
        self.text = Text(theme)

    def render(
        self, screen: pygame.Surface, form: UploadModalState
    ) -> Tuple[pygame.Rect, List[pygame.Rect], pygame.Rect, pygame.Rect, Optional[pygame.Rect]]:
        """
        Render the upload form.

        Returns:
            Tuple of (modal_rect, field_rects, add_rect, cancel_rect, close_rect)
        """
        width = min(560, screen.get_width() - 40)
        height = min(420, screen.get_height() - 40)
        modal_rect, content_rect, close_rect = self.modal_frame.render_centered(
            screen, width, height, title="Upload Image", show_close=True
        )

        label_size = self.theme.font_size_sm
        label_height = self.text.get_font(label_size).get_height()
        field_height = 36
        field_rects = []
        y = content_rect.top

        for index, name in enumerate(form.field_order):
            self.text.render(
                screen,
                FIELD_LABELS.get(name, name.title()),
                (content_rect.left, y),
                color=self.theme.text_secondary,
                size=label_size,
            )
            y += label_height + 2

            field_rect = pygame.Rect(content_rect.left, y, content_rect.width, field_height)
            focused = index == form.focused
            pygame.draw.rect(
                screen,
                self.theme.background,
                field_rect,
                border_radius=self.theme.radius_sm,
            )
            pygame.draw.rect(
                screen,
                self.theme.primary if focused else self.theme.surface_hover,
                field_rect,
                width=2,
                border_radius=self.theme.radius_sm,
            )
            value = form.fields.get(name, "")
            if focused:
                value += "_"
            font_height = self.text.get_font(self.theme.font_size_md).get_height()
            self.text.render(
                screen,
                value,
                (field_rect.left + self.theme.padding_sm, field_rect.centery - font_height // 2),
                color=self.theme.text_primary,
                max_width=field_rect.width - self.theme.padding_md,
            )
            field_rects.append(field_rect)
            y = field_rect.bottom + self.theme.padding_sm

        if form.error:
            self.text.render(
                screen,
                form.error,
                (content_rect.centerx, y),
                color=self.theme.error,
                size=label_size,
                align="center",
            )

        button_height = 40
        button_width = 120
        button_y = content_rect.bottom - button_height
        spacing = self.theme.padding_lg
        add_rect = pygame.Rect(
            content_rect.centerx - button_width - spacing // 2,
            button_y,
            button_width,
            button_height,
        )
        cancel_rect = pygame.Rect(
            content_rect.centerx + spacing // 2, button_y, button_width, button_height
        )
        self.action_button.render(screen, add_rect, "Add")
        self.action_button.render_secondary(screen, cancel_rect, "Cancel")

        return modal_rect, field_rects, add_rect, cancel_rect, close_rect


# Default instance
upload_modal = UploadModal()
