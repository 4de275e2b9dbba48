"""
Thumbnail cache for Pet Gallery.
Loads pet pictures in background threads and hands them to the render loop.
"""

import os
import traceback
from io import BytesIO
from queue import Queue, Empty
from threading import Thread
from typing import Dict, Any, Optional, Tuple
from urllib.parse import urlparse
from urllib.request import url2pathname

import pygame
import requests

from constants import REQUEST_TIMEOUT
from utils.logging import log_error

_LOADING = "loading"


class ImageCache:
    """
    Manages thumbnail loading and caching.

    Uses background threads to load images asynchronously and a queue
    to safely pass them back to the main thread.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """Initialize the image cache."""
        self._cache: Dict[Tuple[str, Tuple[int, int]], Any] = {}
        self._queue: Queue = Queue()
        self._session = session or requests.Session()

    def get_thumbnail(
        self, url: str, size: Tuple[int, int], settings: Dict[str, Any]
    ) -> Optional[pygame.Surface]:
        """
        Get a thumbnail for an image URL, loading async if not cached.

        Args:
            url: Remote URL or local path of the image
            size: Target size of the thumbnail
            settings: Application settings

        Returns:
            pygame.Surface if available, None if not ready, failed or disabled
        """
        if not settings.get("enable_thumbnails", True) or not url:
            return None

        cache_key = (url, tuple(size))
        if cache_key in self._cache:
            cached = self._cache[cache_key]
            if cached != _LOADING:
                return cached
            return None

        self._cache[cache_key] = _LOADING
        thread = Thread(
            target=self._load_image_async,
            args=(url, cache_key, size),
            daemon=True,
        )
        thread.start()
        return None  # Not ready yet

    def update(self):
        """
        Process loaded images from background threads.
        Should be called from main thread each frame.
        """
        while not self._queue.empty():
            try:
                cache_key, image = self._queue.get_nowait()
            except Empty:
                break
            self._cache[cache_key] = image

    def clear(self):
        """Clear all cached images and drain the queue."""
        self._cache.clear()
        while not self._queue.empty():
            try:
                self._queue.get_nowait()
            except Empty:
                break

    def _read_bytes(self, url: str) -> bytes:
        parsed = urlparse(url)
        if parsed.scheme in ("http", "https"):
            response = self._session.get(url, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
            return response.content
        path = url2pathname(parsed.path) if parsed.scheme == "file" else url
        if not os.path.isfile(path):
            raise FileNotFoundError(path)
        with open(path, "rb") as f:
            return f.read()

    def _load_image_async(
        self, url: str, cache_key: Tuple[str, Tuple[int, int]], size: Tuple[int, int]
    ):
        """Load image in background thread."""
        try:
            image = pygame.image.load(BytesIO(self._read_bytes(url)))
            scaled_image = pygame.transform.smoothscale(image, size)
            self._queue.put((cache_key, scaled_image))
        except Exception as e:
            log_error(
                f"Failed to load thumbnail from {url}",
                type(e).__name__,
                traceback.format_exc(),
            )
            self._queue.put((cache_key, None))
