"""
Screen manager - Coordinates screen rendering based on app state.
"""

import pygame
from typing import Any, Dict, Optional

from state import AppState
from ui.theme import Theme, default_theme
from ui.molecules.toast import Toast
from .gallery_grid_screen import GalleryGridScreen, ThumbnailGetter
from .gallery_list_screen import GalleryListScreen
from .modals.confirm_modal import ConfirmModal
from .modals.upload_modal import UploadModal


class ScreenManager:
    """
    Screen manager.

    Picks the grid or list adapter from settings["view_type"] and draws
    the modals and toast over it.
    """

    def __init__(self, theme: Theme = default_theme):
        self.set_theme(theme)

    def set_theme(self, theme: Theme):
        """Rebuild the screens for a new theme."""
        self.theme = theme

        # Initialize screens
        self.grid_screen = GalleryGridScreen(theme)
        self.list_screen = GalleryListScreen(theme)

        # Initialize overlays
        self.confirm_modal = ConfirmModal(theme)
        self.upload_modal = UploadModal(theme)
        self.toast = Toast(theme)

    def get_screen(self, settings: Dict[str, Any]):
        """Adapter for the configured view type."""
        if settings.get("view_type", "grid") == "list":
            return self.list_screen
        return self.grid_screen

    def render(
        self,
        screen: pygame.Surface,
        state: AppState,
        settings: Dict[str, Any],
        get_thumbnail: Optional[ThumbnailGetter] = None,
        now_ms: int = 0,
    ) -> Dict[str, Any]:
        """
        Render the active screen and any overlay.

        Args:
            screen: Surface to render to
            state: Application state object
            settings: Settings dictionary
            get_thumbnail: Function to get a thumbnail for an image
            now_ms: Current pygame tick count, for toast expiry

        Returns:
            Dictionary of interactive element rects
        """
        rects = self.get_screen(settings).render(screen, state, get_thumbnail)

        if state.confirm_modal.show:
            modal_rect, ok_rect, cancel_rect, close_rect = self.confirm_modal.render(
                screen,
                state.confirm_modal.title,
                state.confirm_modal.message_lines,
                button_index=state.confirm_modal.button_index,
            )
            rects["modal"] = modal_rect
            rects["ok_button"] = ok_rect
            rects["cancel_button"] = cancel_rect
            rects["close"] = close_rect

        elif state.upload_modal.show:
            modal_rect, field_rects, add_rect, cancel_rect, close_rect = (
                self.upload_modal.render(screen, state.upload_modal)
            )
            rects["modal"] = modal_rect
            rects["field_rects"] = field_rects
            rects["ok_button"] = add_rect
            rects["cancel_button"] = cancel_rect
            rects["close"] = close_rect

        if state.toast.message and now_ms < state.toast.expires_at:
            rects["toast"] = self.toast.render(
                screen, state.toast.message, state.toast.is_error
            )

        return rects
