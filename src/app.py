"""
Pet Gallery Application - Main orchestrator.

This module provides the main application class that coordinates
all components: state, settings, the gallery session, and UI.
"""

import os
import queue
import traceback
from typing import Any, Dict, Optional

import pygame

from constants import (
    DEV_MODE,
    FPS,
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    THUMBNAIL_SIZE,
    LIST_THUMBNAIL_SIZE,
    TOAST_DURATION,
)
from state import AppState, PetImage, SaveFailure, SaveOutcome
from config.settings import load_settings, save_settings, next_theme, next_view_type
from services.image_cache import ImageCache
from services.save_workflow import SAVE_SUCCESS_MESSAGE
from services.session import GallerySession
from services.upload_form import build_uploaded_image, validate_upload
from ui.theme import resolve_theme
from ui.screens.screen_manager import ScreenManager
from ui.screens.modals.confirm_modal import SAVE_IMAGE_MESSAGE, SAVE_IMAGE_TITLE
from utils.logging import log_error, init_log_file
from web_companion import WebCompanion, serialize_web_state


class PetGalleryApp:
    """
    Main application class for Pet Gallery.

    Owns one GallerySession for the lifetime of the window. Core state
    arrives on background threads, is queued by the stream callbacks,
    and is applied to AppState on the main loop.
    """

    def __init__(self, session: Optional[GallerySession] = None):
        """Initialize the application."""
        # Initialize logging
        init_log_file()

        # Initialize pygame
        pygame.init()
        pygame.display.set_caption("Pets Gallery")

        if DEV_MODE or os.environ.get("ANDROID_BUILD") != "1":
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        else:
            display_info = pygame.display.Info()
            self.screen = pygame.display.set_mode(
                (display_info.current_w, display_info.current_h),
                pygame.FULLSCREEN,
            )
        self.clock = pygame.time.Clock()

        # Initialize state
        self.state = AppState()

        # Load settings and theme
        self.settings = load_settings()
        self.theme = resolve_theme(self.settings.get("theme", "system"))

        # Gallery core; stream callbacks only enqueue
        self._state_queue: queue.Queue = queue.Queue()
        self._outcome_queue: queue.Queue = queue.Queue()
        self.session = session or GallerySession(self.settings)
        self._subscriptions = [
            self.session.gallery.subscribe(self._state_queue.put),
            self.session.saver.subscribe(self._outcome_queue.put),
        ]
        self._last_outcome: Optional[SaveOutcome] = None

        # Initialize screen manager and image cache
        self.screen_manager = ScreenManager(self.theme)
        self.image_cache = ImageCache()

        # Optional web companion
        self.web_companion: Optional[WebCompanion] = None
        if self.settings.get("web_companion_enabled"):
            companion = WebCompanion(self.settings.get("web_companion_port"))
            if companion.start():
                self.web_companion = companion

        # Key that opened a text field; its TEXTINPUT echo is dropped
        self._suppress_text: Optional[str] = None

        # Start text input for search and upload
        pygame.key.start_text_input()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self):
        """Run the main application loop."""
        self.session.start()

        while self.state.running:
            self.clock.tick(FPS)

            for event in pygame.event.get():
                self.handle_event(event)

            self.drain_updates()
            self.image_cache.update()

            if self.web_companion:
                self.web_companion.process_actions(self.session)

            rects = self.screen_manager.render(
                self.screen,
                self.state,
                self.settings,
                get_thumbnail=self._get_thumbnail,
                now_ms=pygame.time.get_ticks(),
            )
            self.state.rects = rects
            self.state.item_rects = rects.get("item_rects", [])
            self.state.scroll_offset = rects.get("scroll_offset", 0)

            pygame.display.flip()

        self.shutdown()

    def shutdown(self):
        """Tear down the session and the window."""
        for subscription in self._subscriptions:
            subscription.unsubscribe()
        self.session.close()
        if self.web_companion:
            self.web_companion.stop()
        pygame.quit()

    def drain_updates(self):
        """Apply queued gallery states and save outcomes on the main thread."""
        changed = False
        while True:
            try:
                gallery_state = self._state_queue.get_nowait()
            except queue.Empty:
                break
            self.state.apply_gallery_state(gallery_state)
            changed = True
        gallery = self.session.gallery
        self.state.sync_intents(gallery.search_text, gallery.sort_ascending)

        while True:
            try:
                outcome = self._outcome_queue.get_nowait()
            except queue.Empty:
                break
            self._show_outcome(outcome)
            changed = True

        if changed and self.web_companion:
            self.web_companion.push_state(
                serialize_web_state(self.session, self._last_outcome)
            )

    def _show_outcome(self, outcome: SaveOutcome):
        self._last_outcome = outcome
        toast = self.state.toast
        if isinstance(outcome, SaveFailure):
            toast.message = outcome.message
            toast.is_error = True
        else:
            toast.message = SAVE_SUCCESS_MESSAGE
            toast.is_error = False
        toast.expires_at = pygame.time.get_ticks() + TOAST_DURATION

    def _get_thumbnail(self, image: PetImage) -> Optional[pygame.Surface]:
        size = LIST_THUMBNAIL_SIZE if self.settings.get("view_type") == "list" else THUMBNAIL_SIZE
        return self.image_cache.get_thumbnail(image.url, size, self.settings)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.state.running = False
        elif event.type == pygame.KEYDOWN:
            self._suppress_text = None
            self._handle_key_event(event)
        elif event.type == pygame.TEXTINPUT:
            self._handle_text_input(event.text)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_click(event.pos)
        elif event.type == pygame.MOUSEWHEEL:
            self._move_highlight("up" if event.y > 0 else "down")

    def _handle_key_event(self, event: pygame.event.Event):
        """Handle keyboard events."""
        if self.state.confirm_modal.show:
            self._handle_confirm_key(event)
            return
        if self.state.upload_modal.show:
            self._handle_upload_key(event)
            return
        if self.state.search.active:
            self._handle_search_key(event)
            return

        key = event.key
        if key == pygame.K_ESCAPE:
            self._go_back()
        elif key in (pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT):
            self._move_highlight(pygame.key.name(key))
        elif key == pygame.K_RETURN:
            self._show_save_confirm()
        elif key == pygame.K_r:
            self.session.gallery.refresh()
        elif key == pygame.K_SLASH:
            self.state.search.active = True
            self._suppress_text = event.unicode
        elif key == pygame.K_a:
            self.session.gallery.set_sort_order(True)
        elif key == pygame.K_z:
            self.session.gallery.set_sort_order(False)
        elif key == pygame.K_u:
            self.state.upload_modal.reset()
            self.state.upload_modal.show = True
            self._suppress_text = event.unicode
        elif key == pygame.K_t:
            self._cycle_theme()
        elif key == pygame.K_v:
            self._toggle_view()

    def _handle_search_key(self, event: pygame.event.Event):
        if event.key in (pygame.K_ESCAPE, pygame.K_RETURN):
            self.state.search.active = False
        elif event.key == pygame.K_BACKSPACE and self.state.search.text:
            self._set_search_text(self.state.search.text[:-1])

    def _handle_upload_key(self, event: pygame.event.Event):
        form = self.state.upload_modal
        if event.key == pygame.K_ESCAPE:
            form.reset()
        elif event.key in (pygame.K_TAB, pygame.K_DOWN):
            form.focused = (form.focused + 1) % len(form.field_order)
        elif event.key == pygame.K_UP:
            form.focused = (form.focused - 1) % len(form.field_order)
        elif event.key == pygame.K_BACKSPACE:
            name = form.focused_field
            form.fields[name] = form.fields[name][:-1]
        elif event.key == pygame.K_RETURN:
            self._submit_upload()

    def _handle_confirm_key(self, event: pygame.event.Event):
        modal = self.state.confirm_modal
        if event.key == pygame.K_ESCAPE:
            modal.show = False
        elif event.key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_TAB):
            modal.button_index = 1 - modal.button_index
        elif event.key == pygame.K_RETURN:
            if modal.button_index == 0:
                self._confirm_save()
            else:
                modal.show = False

    def _handle_text_input(self, text: str):
        if self._suppress_text is not None and text == self._suppress_text:
            self._suppress_text = None
            return
        if self.state.confirm_modal.show:
            return
        if self.state.upload_modal.show:
            form = self.state.upload_modal
            form.fields[form.focused_field] += text
            form.error = ""
        elif self.state.search.active:
            self._set_search_text(self.state.search.text + text)

    def _handle_click(self, pos: tuple):
        rects: Dict[str, Any] = self.state.rects

        if self.state.any_modal_open():
            if self._hit(rects.get("close"), pos) or self._hit(rects.get("cancel_button"), pos):
                self.state.confirm_modal.show = False
                self.state.upload_modal.reset()
            elif self._hit(rects.get("ok_button"), pos):
                if self.state.confirm_modal.show:
                    self._confirm_save()
                else:
                    self._submit_upload()
            else:
                for index, field_rect in enumerate(rects.get("field_rects", [])):
                    if field_rect.collidepoint(pos):
                        self.state.upload_modal.focused = index
            return

        if self._hit(rects.get("sort_asc"), pos):
            self.session.gallery.set_sort_order(True)
        elif self._hit(rects.get("sort_desc"), pos):
            self.session.gallery.set_sort_order(False)
        elif self._hit(rects.get("search"), pos):
            self.state.search.active = True
        else:
            self.state.search.active = False
            offset = self.state.scroll_offset
            for i, item_rect in enumerate(self.state.item_rects):
                if item_rect.collidepoint(pos):
                    self.state.highlighted = offset + i
                    self._show_save_confirm()
                    break

    @staticmethod
    def _hit(rect, pos) -> bool:
        return rect is not None and rect.collidepoint(pos)

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def _set_search_text(self, text: str):
        self.state.search.text = text
        self.state.highlighted = 0
        self.session.gallery.set_search_text(text)

    def _move_highlight(self, direction: str):
        self.screen_manager.get_screen(self.settings).move_highlight(self.state, direction)

    def _go_back(self):
        """Esc clears the search first, then quits."""
        if self.state.search.text:
            self._set_search_text("")
        else:
            self.state.running = False

    def _show_save_confirm(self):
        image = self.state.highlighted_image
        if image is None:
            return
        modal = self.state.confirm_modal
        modal.title = SAVE_IMAGE_TITLE
        modal.message_lines = [SAVE_IMAGE_MESSAGE]
        modal.button_index = 0
        modal.data = image
        modal.show = True

    def _confirm_save(self):
        modal = self.state.confirm_modal
        modal.show = False
        if isinstance(modal.data, PetImage):
            self.session.saver.save(modal.data.url)
        modal.data = None

    def _submit_upload(self):
        form = self.state.upload_modal
        error = validate_upload(form.fields)
        if error:
            form.error = error
            return
        self.session.gallery.add_image(build_uploaded_image(form.fields))
        form.reset()

    def _cycle_theme(self):
        self.settings["theme"] = next_theme(self.settings.get("theme", "system"))
        save_settings(self.settings)
        self.theme = resolve_theme(self.settings["theme"])
        self.screen_manager.set_theme(self.theme)

    def _toggle_view(self):
        self.settings["view_type"] = next_view_type(self.settings.get("view_type", "grid"))
        save_settings(self.settings)
        self.state.highlighted = 0
        self.image_cache.clear()


def main():
    """Entry point for the application."""
    try:
        app = PetGalleryApp()
        app.run()
    except Exception as e:
        log_error(f"Application error: {e}", type(e).__name__, traceback.format_exc())
        raise


if __name__ == "__main__":
    main()
