"""
Confirm modal - Confirmation dialog with OK/Cancel buttons.
"""

import pygame
from typing import List, Optional, Tuple

from ui.theme import Theme, default_theme
from ui.organisms.modal_frame import ModalFrame
from ui.molecules.action_button import ActionButton
from ui.atoms.text import Text

SAVE_IMAGE_TITLE = "Save Image"
SAVE_IMAGE_MESSAGE = "Are you sure you want to save this image?"


class ConfirmModal:
    """
    Confirmation modal.

    Displays a message with OK and Cancel buttons. Used to confirm
    saving the highlighted image to the device.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_frame = ModalFrame(theme)
        self.action_button = ActionButton(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        title: str,
        message_lines: List[str],
        ok_label: str = "OK",
        cancel_label: str = "Cancel",
        button_index: int = 0,  # 0 = OK, 1 = Cancel
    ) -> Tuple[pygame.Rect, pygame.Rect, pygame.Rect, Optional[pygame.Rect]]:
        """
        Render the confirmation modal.

        Args:
            screen: Surface to render to
            title: Modal title
            message_lines: Message lines to display (wrapped to fit)
            ok_label: Label for OK button
            cancel_label: Label for Cancel button
            button_index: Currently focused button (0=OK, 1=Cancel)

        Returns:
            Tuple of (modal_rect, ok_button_rect, cancel_button_rect, close_rect)
        """
        width = min(460, screen.get_width() - 40)
        text_width = width - self.theme.padding_lg * 2 - self.theme.padding_md * 2
        lines: List[str] = []
        for line in message_lines:
            lines.extend(self.text.wrap(line, text_width))

        line_height = self.text.get_font(self.theme.font_size_md).get_linesize() + 4
        button_height = 44
        content_height = (
            len(lines) * line_height + button_height + self.theme.padding_lg * 2
        )
        height = min(content_height + 110, screen.get_height() - 40)

        modal_rect, content_rect, close_rect = self.modal_frame.render_centered(
            screen, width, height, title=title, show_close=True
        )

        button_y = content_rect.bottom - button_height
        y = content_rect.top + self.theme.padding_sm
        for line in lines:
            if y + line_height > button_y - self.theme.padding_md:
                break
            self.text.render(
                screen,
                line,
                (content_rect.centerx, y),
                color=self.theme.text_primary,
                align="center",
                max_width=text_width,
            )
            y += line_height

        button_width = 120
        spacing = self.theme.padding_lg
        ok_rect = pygame.Rect(
            content_rect.centerx - button_width - spacing // 2,
            button_y,
            button_width,
            button_height,
        )
        cancel_rect = pygame.Rect(
            content_rect.centerx + spacing // 2, button_y, button_width, button_height
        )

        self.action_button.render(screen, ok_rect, ok_label, hover=button_index == 0)
        self.action_button.render_secondary(
            screen, cancel_rect, cancel_label, hover=button_index == 1
        )

        return modal_rect, ok_rect, cancel_rect, close_rect


# Default instance
confirm_modal = ConfirmModal()
