"""
Save workflow for Pet Gallery.

Downloads a displayed image, re-encodes it as JPEG and hands it to the
StorageSaver. Every attempt ends with exactly one SaveOutcome on the
outcome broadcast.
"""

import os
import threading
import time
import traceback
from io import BytesIO
from typing import Callable, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests
from PIL import Image

from constants import IMAGE_FILENAME_PREFIX, JPEG_QUALITY, REQUEST_TIMEOUT
from services.storage_saver import (
    StorageError,
    StorageOutOfMemory,
    StoragePermissionDenied,
)
from state import SaveFailure, SaveOutcome, SaveSuccess
from utils.logging import log_error
from utils.platform import has_write_storage_permission
from utils.streams import Broadcast

SAVE_SUCCESS_MESSAGE = "Image saved successfully"
PERMISSION_MESSAGE = "Permission required to save image."
DECODE_MESSAGE = "Failed to decode image."
OUT_OF_MEMORY_MESSAGE = "Insufficient memory to save image."
SAVE_FAILED_PREFIX = "Failed to save image: "


class DecodeError(Exception):
    """Downloaded bytes are not a readable image."""


class SaveWorkflow:
    """
    Coordinates permission check, download, decode and persistence.

    Saves run on independent daemon threads and share no mutable state,
    so several may be in flight at once.
    """

    def __init__(
        self,
        storage_saver,
        has_permission: Callable[[], bool] = has_write_storage_permission,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
        clock: Callable[[], float] = time.time,
    ):
        self.storage_saver = storage_saver
        self.has_permission = has_permission
        self.session = session or requests.Session()
        self.timeout = timeout
        self.clock = clock
        self.outcomes: Broadcast[SaveOutcome] = Broadcast()
        self._closed = False
        self._name_lock = threading.Lock()
        self._last_stamp = 0

    def subscribe(self, callback: Callable[[SaveOutcome], None]):
        """Listen for outcomes emitted after this call."""
        return self.outcomes.subscribe(callback)

    def save(self, image_url: str) -> threading.Thread:
        """Start saving image_url in the background."""
        thread = threading.Thread(target=self.save_sync, args=(image_url,), daemon=True)
        thread.start()
        return thread

    def save_sync(self, image_url: str) -> SaveOutcome:
        """Run one save attempt on the calling thread and emit its outcome."""
        outcome = self._perform(image_url)
        if not self._closed:
            self.outcomes.emit(outcome)
        return outcome

    def close(self):
        """Stop delivering outcomes; in-flight saves still finish."""
        self._closed = True

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _perform(self, image_url: str) -> SaveOutcome:
        try:
            allowed = self.has_permission()
        except Exception as e:
            self._log_failure(image_url, e)
            allowed = False
        if not allowed:
            return SaveFailure(PERMISSION_MESSAGE)

        try:
            raw = self._download(image_url)
            image = self._decode(raw)
            data = self._encode_jpeg(image)
            self.storage_saver.persist(data, self._make_filename(), "image/jpeg")
        except DecodeError as e:
            self._log_failure(image_url, e)
            return SaveFailure(DECODE_MESSAGE)
        except (MemoryError, StorageOutOfMemory) as e:
            self._log_failure(image_url, e)
            return SaveFailure(OUT_OF_MEMORY_MESSAGE)
        except StoragePermissionDenied as e:
            self._log_failure(image_url, e)
            return SaveFailure(PERMISSION_MESSAGE)
        except StorageError as e:
            self._log_failure(image_url, e)
            return SaveFailure(f"{SAVE_FAILED_PREFIX}{e.detail}")
        except Exception as e:
            self._log_failure(image_url, e)
            return SaveFailure(f"{SAVE_FAILED_PREFIX}{e}")

        return SaveSuccess()

    def _download(self, image_url: str) -> bytes:
        """Read the image bytes from a remote URL or a local upload."""
        parsed = urlparse(image_url)
        if parsed.scheme in ("http", "https"):
            response = self.session.get(image_url, timeout=self.timeout)
            response.raise_for_status()
            return response.content

        path = url2pathname(parsed.path) if parsed.scheme == "file" else image_url
        if not os.path.isfile(path):
            raise FileNotFoundError(f"No such image: {image_url}")
        with open(path, "rb") as f:
            return f.read()

    def _decode(self, raw: bytes) -> Image.Image:
        try:
            image = Image.open(BytesIO(raw))
            image.load()
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
            raise DecodeError(str(e)) from e
        return image

    def _encode_jpeg(self, image: Image.Image) -> bytes:
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        buffer = BytesIO()
        image.save(buffer, format="JPEG", quality=JPEG_QUALITY)
        return buffer.getvalue()

    def _make_filename(self) -> str:
        """Timestamp-based name, bumped so parallel saves never collide."""
        with self._name_lock:
            stamp = int(self.clock() * 1000)
            if stamp <= self._last_stamp:
                stamp = self._last_stamp + 1
            self._last_stamp = stamp
        return f"{IMAGE_FILENAME_PREFIX}{stamp}.jpg"

    def _log_failure(self, image_url: str, e: BaseException):
        log_error(
            f"Failed to save image from {image_url}",
            type(e).__name__,
            traceback.format_exc(),
        )
