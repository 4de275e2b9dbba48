"""
Gallery state machine for Pet Gallery.

Owns the fetched image collection and the search/sort derived view, and
publishes a single Loading / Success / Error state stream that the UI
adapters render from.
"""

import threading
import traceback
from typing import Callable, List, Optional, Tuple

from services.pet_api import NetworkError, NoConnectivity, Timeout
from state import Error, GalleryState, Loading, PetImage, Success
from utils.logging import log_error
from utils.streams import StateStream

NO_CONNECTIVITY_MESSAGE = "No Internet Connection. Please try again later."
TIMEOUT_MESSAGE = "Request Timeout. Please try again."
LOAD_FAILED_PREFIX = "Failed to load images: "


def filter_images(images: List[PetImage], query: str) -> List[PetImage]:
    """Keep images whose title or description contains query (any case)."""
    if not query:
        return list(images)
    return [image for image in images if image.matches(query)]


def sort_images(images: List[PetImage], ascending: bool) -> List[PetImage]:
    """Stable sort by title."""
    return sorted(images, key=lambda image: image.title, reverse=not ascending)


def error_message_for(exc: Exception) -> str:
    """Map a repository failure to the message shown to the user."""
    if isinstance(exc, NoConnectivity):
        return NO_CONNECTIVITY_MESSAGE
    if isinstance(exc, Timeout):
        return TIMEOUT_MESSAGE
    if isinstance(exc, NetworkError):
        return f"{LOAD_FAILED_PREFIX}{exc.detail}"
    return f"{LOAD_FAILED_PREFIX}{exc}"


class GalleryStateMachine:
    """
    Single writer over the gallery collection.

    All intents mutate state and publish under one lock, so published
    states follow invocation order. The displayed list is always derived
    as sort(filter(baseline)), except for uploads appended while
    filter_uploads is off.
    """

    def __init__(self, repository, filter_uploads: bool = False):
        """
        Args:
            repository: Object with a fetch() -> list of PetImage method
            filter_uploads: Re-apply the search filter when images are added
        """
        self.repository = repository
        self.filter_uploads = filter_uploads
        self._lock = threading.RLock()
        self._stream: StateStream[GalleryState] = StateStream(Loading())
        self._baseline: List[PetImage] = []
        self._displayed: List[PetImage] = []
        self._loaded = False
        self._search_text = ""
        self._sort_ascending: Optional[bool] = None
        self._refreshing = False
        self._closed = False
        self._refresh_thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> GalleryState:
        return self._stream.value

    def subscribe(self, callback: Callable[[GalleryState], None]):
        """Subscribe to state changes; the current state is replayed."""
        return self._stream.subscribe(callback)

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def sort_ascending(self) -> Optional[bool]:
        return self._sort_ascending

    @property
    def baseline(self) -> Tuple[PetImage, ...]:
        with self._lock:
            return tuple(self._baseline)

    @property
    def displayed(self) -> Tuple[PetImage, ...]:
        with self._lock:
            return tuple(self._displayed)

    @property
    def is_refreshing(self) -> bool:
        return self._refreshing

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def refresh(self) -> bool:
        """
        Reload images from the repository on a background thread.

        Returns:
            False if a refresh is already running or the machine is closed
        """
        if not self._begin_refresh():
            return False
        thread = threading.Thread(target=self._run_refresh, daemon=True)
        self._refresh_thread = thread
        thread.start()
        return True

    def refresh_sync(self) -> bool:
        """Same as refresh(), but fetches on the calling thread."""
        if not self._begin_refresh():
            return False
        self._run_refresh()
        return True

    def wait_for_refresh(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the background refresh finishes.

        Returns:
            True if no refresh is running afterwards
        """
        thread = self._refresh_thread
        if thread is not None:
            thread.join(timeout)
        return not self._refreshing

    def set_search_text(self, text: str):
        """Filter the collection by text; publishes immediately."""
        with self._lock:
            if self._closed:
                return
            self._search_text = text or ""
            self._displayed = self._derive()
            self._publish(Success(tuple(self._displayed)))

    def set_sort_order(self, ascending: bool):
        """Sort the displayed images by title."""
        with self._lock:
            if self._closed:
                return
            self._sort_ascending = bool(ascending)
            if not self._loaded:
                # Applied once the first fetch lands
                return
            self._displayed = sort_images(self._displayed, self._sort_ascending)
            self._publish(Success(tuple(self._displayed)))

    def add_image(self, image: PetImage):
        """Append an uploaded image to the collection."""
        with self._lock:
            if self._closed:
                return
            self._baseline.append(image)
            self._loaded = True
            if self.filter_uploads:
                self._displayed = self._derive()
            else:
                self._displayed.append(image)
            self._publish(Success(tuple(self._displayed)))

    def close(self):
        """Detach from the UI; later intents and late results are dropped."""
        with self._lock:
            self._closed = True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _begin_refresh(self) -> bool:
        with self._lock:
            if self._closed or self._refreshing:
                return False
            self._refreshing = True
            self._publish(Loading())
            return True

    def _run_refresh(self):
        images = None
        message = ""
        try:
            images = list(self.repository.fetch())
        except Exception as e:
            message = error_message_for(e)
            log_error(
                f"Failed to refresh gallery: {e}",
                type(e).__name__,
                traceback.format_exc(),
            )

        with self._lock:
            self._refreshing = False
            if self._closed:
                return
            if images is None:
                self._publish(Error(message))
                return
            self._baseline = images
            self._loaded = True
            self._displayed = self._derive()
            self._publish(Success(tuple(self._displayed)))

    def _derive(self) -> List[PetImage]:
        images = filter_images(self._baseline, self._search_text)
        if self._sort_ascending is not None:
            images = sort_images(images, self._sort_ascending)
        return images

    def _publish(self, state: GalleryState):
        self._stream.publish(state)
