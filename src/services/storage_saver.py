"""
Storage saver for Pet Gallery.

Persists encoded image bytes into the device's shared picture storage.
Two strategies exist: writing straight into the Pictures directory, and
inserting through Android's MediaStore on scoped-storage devices. The
rest of the app only sees StorageSaver.persist().
"""

import errno
import os
from typing import Optional

from utils.platform import default_pictures_dir, uses_scoped_storage


class StorageError(Exception):
    """Base class for failures while persisting an image."""

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail


class StoragePermissionDenied(StorageError):
    """Write access was refused or revoked."""


class StorageOutOfMemory(StorageError):
    """Device ran out of memory or disk space."""


class StorageIOFailure(StorageError):
    """Any other I/O or platform API failure."""


def _map_os_error(e: OSError) -> StorageError:
    if isinstance(e, PermissionError):
        return StoragePermissionDenied(str(e))
    if e.errno in (errno.ENOSPC, errno.ENOMEM):
        return StorageOutOfMemory(str(e))
    return StorageIOFailure(str(e))


class DirectFileStrategy:
    """Write the file into a directory on the filesystem."""

    def __init__(self, pictures_dir: str):
        self.pictures_dir = pictures_dir

    def write(self, data: bytes, filename: str, mime_type: str) -> str:
        target = os.path.join(self.pictures_dir, filename)
        try:
            os.makedirs(self.pictures_dir, exist_ok=True)
            with open(target, "wb") as f:
                f.write(data)
                f.flush()
        except MemoryError as e:
            raise StorageOutOfMemory(str(e) or "out of memory") from e
        except OSError as e:
            raise _map_os_error(e) from e
        return target


class MediaStoreStrategy:
    """Insert the image through the Android content resolver."""

    RELATIVE_PATH = "Pictures"

    def write(self, data: bytes, filename: str, mime_type: str) -> str:
        try:
            from jnius import autoclass, cast
        except ImportError as e:
            raise StorageIOFailure("MediaStore is only available on Android") from e

        try:
            activity = autoclass("org.kivy.android.PythonActivity").mActivity
            resolver = activity.getContentResolver()
            content_values = autoclass("android.content.ContentValues")()
            media = autoclass("android.provider.MediaStore$Images$Media")
            content_values.put(media.DISPLAY_NAME, filename)
            content_values.put(media.MIME_TYPE, mime_type)
            content_values.put(media.RELATIVE_PATH, self.RELATIVE_PATH)

            uri = resolver.insert(media.EXTERNAL_CONTENT_URI, content_values)
            if uri is None:
                raise StorageIOFailure("MediaStore insert returned no URI")

            stream = cast(
                "java.io.OutputStream", resolver.openOutputStream(uri)
            )
            try:
                stream.write(data)
                stream.flush()
            finally:
                stream.close()
            return str(uri.toString())
        except StorageError:
            raise
        except MemoryError as e:
            raise StorageOutOfMemory(str(e) or "out of memory") from e
        except Exception as e:
            # jnius surfaces Java exceptions as JavaException
            message = str(e)
            if "SecurityException" in message:
                raise StoragePermissionDenied(message) from e
            raise StorageIOFailure(message) from e


class StorageSaver:
    """
    Persist images to shared picture storage.

    The strategy is picked once, from the platform: MediaStore on Android
    10+, direct filesystem writes everywhere else.
    """

    def __init__(self, pictures_dir: str = "", strategy=None):
        if strategy is None:
            if uses_scoped_storage():
                strategy = MediaStoreStrategy()
            else:
                strategy = DirectFileStrategy(pictures_dir or default_pictures_dir())
        self.strategy = strategy

    def persist(
        self, data: bytes, filename: str, mime_type: str = "image/jpeg"
    ) -> Optional[str]:
        """
        Write image bytes under the given filename.

        Returns:
            The saved location (path or content URI)

        Raises:
            StorageError: on any failure
        """
        return self.strategy.write(data, filename, mime_type)
