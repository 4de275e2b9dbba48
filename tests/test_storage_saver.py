"""Tests for persisting images to the pictures directory."""

import errno
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services import storage_saver as storage_module
from services.storage_saver import (
    DirectFileStrategy,
    MediaStoreStrategy,
    StorageIOFailure,
    StorageOutOfMemory,
    StoragePermissionDenied,
    StorageSaver,
)


def test_direct_write_creates_directory(tmp_path):
    target_dir = tmp_path / "Pictures" / "nested"
    saver = StorageSaver(str(target_dir))

    location = saver.persist(b"\xff\xd8data", "Image_1.jpg")

    assert location == os.path.join(str(target_dir), "Image_1.jpg")
    with open(location, "rb") as f:
        assert f.read() == b"\xff\xd8data"


def test_default_strategy_off_android(tmp_path, monkeypatch):
    monkeypatch.setattr(storage_module, "uses_scoped_storage", lambda: False)
    saver = StorageSaver(str(tmp_path))
    assert isinstance(saver.strategy, DirectFileStrategy)


def test_scoped_storage_uses_media_store(monkeypatch):
    monkeypatch.setattr(storage_module, "uses_scoped_storage", lambda: True)
    saver = StorageSaver()
    assert isinstance(saver.strategy, MediaStoreStrategy)


def test_empty_pictures_dir_uses_platform_default(tmp_path, monkeypatch):
    monkeypatch.setattr(storage_module, "uses_scoped_storage", lambda: False)
    monkeypatch.setattr(storage_module, "default_pictures_dir", lambda: str(tmp_path))
    saver = StorageSaver("")
    assert saver.strategy.pictures_dir == str(tmp_path)


def _failing_open(error):
    def fake_open(*args, **kwargs):
        raise error

    return fake_open


@pytest.mark.parametrize(
    "error, expected",
    [
        (PermissionError(errno.EACCES, "Permission denied"), StoragePermissionDenied),
        (OSError(errno.ENOSPC, "No space left on device"), StorageOutOfMemory),
        (OSError(errno.EIO, "I/O error"), StorageIOFailure),
        (MemoryError(), StorageOutOfMemory),
    ],
)
def test_os_errors_are_mapped(tmp_path, monkeypatch, error, expected):
    monkeypatch.setattr(storage_module, "open", _failing_open(error), raising=False)
    saver = StorageSaver(str(tmp_path))
    with pytest.raises(expected):
        saver.persist(b"data", "Image_1.jpg")


def test_media_store_unavailable_off_android():
    """Without jnius the MediaStore strategy fails as an I/O error."""
    try:
        import jnius  # noqa: F401
    except ImportError:
        with pytest.raises(StorageIOFailure):
            MediaStoreStrategy().write(b"data", "Image_1.jpg", "image/jpeg")
    else:
        pytest.skip("jnius is installed")
