"""Tests for the save workflow.

HTTP and storage are faked; images are real bytes produced with Pillow so
the decode and JPEG re-encode steps run for real.
"""

import os
import sys
from io import BytesIO

import pytest
from PIL import Image

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services.save_workflow import (
    DECODE_MESSAGE,
    OUT_OF_MEMORY_MESSAGE,
    PERMISSION_MESSAGE,
    SaveWorkflow,
)
from services.storage_saver import (
    StorageIOFailure,
    StorageOutOfMemory,
    StoragePermissionDenied,
)
from state import SaveFailure, SaveSuccess

IMAGE_URL = "https://example.com/rex.png"


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

def _png_bytes(size=(8, 8), mode="RGBA"):
    buffer = BytesIO()
    Image.new(mode, size, (200, 120, 40, 255)[: len(mode)]).save(buffer, format="PNG")
    return buffer.getvalue()


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            import requests

            raise requests.HTTPError(f"HTTP {self.status_code}")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requested = []

    def get(self, url, timeout=None):
        self.requested.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


class FakeStorage:
    """Records persisted files; optionally raises a fixed error."""

    def __init__(self, error=None):
        self.error = error
        self.saved = []

    def persist(self, data, filename, mime_type="image/jpeg"):
        if self.error is not None:
            raise self.error
        self.saved.append((data, filename, mime_type))
        return f"/pictures/{filename}"


def _workflow(storage=None, content=None, allowed=True, clock=lambda: 1.0, **kwargs):
    session = kwargs.pop("session", None) or FakeSession(
        FakeResponse(content if content is not None else _png_bytes())
    )
    return SaveWorkflow(
        storage or FakeStorage(),
        has_permission=lambda: allowed,
        session=session,
        clock=clock,
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

def test_save_success_writes_jpeg():
    storage = FakeStorage()
    workflow = _workflow(storage)

    outcome = workflow.save_sync(IMAGE_URL)

    assert outcome == SaveSuccess()
    assert len(storage.saved) == 1
    data, filename, mime_type = storage.saved[0]
    assert data[:2] == b"\xff\xd8", "saved bytes must be a JPEG"
    assert filename == "Image_1000.jpg"
    assert mime_type == "image/jpeg"
    assert Image.open(BytesIO(data)).format == "JPEG"


def test_permission_denied_never_touches_storage():
    """Missing permission fails fast without downloading or persisting."""
    storage = FakeStorage()
    session = FakeSession(FakeResponse(_png_bytes()))
    workflow = _workflow(storage, allowed=False, session=session)

    outcome = workflow.save_sync(IMAGE_URL)

    assert outcome == SaveFailure("Permission required to save image.")
    assert outcome.message == PERMISSION_MESSAGE
    assert storage.saved == []
    assert session.requested == []


def test_decode_failure():
    storage = FakeStorage()
    workflow = _workflow(storage, content=b"definitely not an image")

    outcome = workflow.save_sync(IMAGE_URL)

    assert outcome == SaveFailure("Failed to decode image.")
    assert outcome.message == DECODE_MESSAGE
    assert storage.saved == []


def test_storage_out_of_memory():
    workflow = _workflow(FakeStorage(error=StorageOutOfMemory("ENOSPC")))
    outcome = workflow.save_sync(IMAGE_URL)
    assert outcome == SaveFailure(OUT_OF_MEMORY_MESSAGE)
    assert OUT_OF_MEMORY_MESSAGE == "Insufficient memory to save image."


def test_storage_permission_revoked_mid_save():
    workflow = _workflow(FakeStorage(error=StoragePermissionDenied("EACCES")))
    assert workflow.save_sync(IMAGE_URL) == SaveFailure(PERMISSION_MESSAGE)


def test_storage_io_failure_includes_detail():
    workflow = _workflow(FakeStorage(error=StorageIOFailure("disk gone")))
    assert workflow.save_sync(IMAGE_URL) == SaveFailure("Failed to save image: disk gone")


def test_download_failure_reported_as_save_failure():
    import requests

    session = FakeSession(error=requests.ConnectionError("offline"))
    workflow = _workflow(session=session)

    outcome = workflow.save_sync(IMAGE_URL)

    assert isinstance(outcome, SaveFailure)
    assert outcome.message.startswith("Failed to save image: ")
    assert "offline" in outcome.message


def test_http_error_reported_as_save_failure():
    session = FakeSession(FakeResponse(b"", status_code=404))
    outcome = _workflow(session=session).save_sync(IMAGE_URL)
    assert isinstance(outcome, SaveFailure)
    assert "404" in outcome.message


def test_save_local_upload(tmp_path):
    """Uploaded images can point at a local file."""
    path = tmp_path / "upload.png"
    path.write_bytes(_png_bytes(mode="RGB"))
    storage = FakeStorage()

    outcome = _workflow(storage).save_sync(str(path))

    assert outcome == SaveSuccess()
    assert len(storage.saved) == 1


def test_save_missing_local_file(tmp_path):
    outcome = _workflow().save_sync(str(tmp_path / "missing.png"))
    assert isinstance(outcome, SaveFailure)
    assert outcome.message.startswith("Failed to save image: ")


def test_filenames_unique_for_same_timestamp():
    storage = FakeStorage()
    workflow = _workflow(storage, clock=lambda: 5.0)

    workflow.save_sync(IMAGE_URL)
    workflow.save_sync(IMAGE_URL)

    names = [name for _, name, _ in storage.saved]
    assert names == ["Image_5000.jpg", "Image_5001.jpg"]


# ---------------------------------------------------------------------------
# Outcome broadcast
# ---------------------------------------------------------------------------

def test_each_save_emits_exactly_one_outcome():
    workflow = _workflow()
    seen = []
    workflow.subscribe(seen.append)

    workflow.save_sync(IMAGE_URL)
    workflow.save_sync("https://example.com/other.png")

    assert seen == [SaveSuccess(), SaveSuccess()]


def test_outcome_not_replayed_to_late_subscriber():
    workflow = _workflow(allowed=False)
    early = []
    workflow.subscribe(early.append)

    workflow.save_sync(IMAGE_URL)

    late = []
    workflow.subscribe(late.append)
    assert early == [SaveFailure(PERMISSION_MESSAGE)]
    assert late == []


def test_failing_permission_check_still_emits_one_outcome():
    """A permission lookup that raises is reported, not lost with the thread."""

    def broken_check():
        raise RuntimeError("check_permission failed")

    storage = FakeStorage()
    workflow = SaveWorkflow(
        storage,
        has_permission=broken_check,
        session=FakeSession(FakeResponse(_png_bytes())),
    )
    seen = []
    workflow.subscribe(seen.append)

    workflow.save(IMAGE_URL).join(5)

    assert seen == [SaveFailure(PERMISSION_MESSAGE)]
    assert storage.saved == []


def test_background_save_emits_outcome():
    workflow = _workflow()
    seen = []
    workflow.subscribe(seen.append)

    thread = workflow.save(IMAGE_URL)
    thread.join(5)

    assert seen == [SaveSuccess()]


def test_unsubscribe_stops_delivery():
    workflow = _workflow()
    seen = []
    subscription = workflow.subscribe(seen.append)
    subscription.unsubscribe()

    workflow.save_sync(IMAGE_URL)
    assert seen == []


def test_closed_workflow_still_returns_but_does_not_emit():
    workflow = _workflow()
    seen = []
    workflow.subscribe(seen.append)
    workflow.close()

    assert workflow.save_sync(IMAGE_URL) == SaveSuccess()
    assert seen == []


@pytest.mark.parametrize("mode", ["RGBA", "P", "L"])
def test_non_rgb_images_are_converted(mode):
    buffer = BytesIO()
    Image.new(mode, (4, 4)).save(buffer, format="PNG")
    storage = FakeStorage()

    assert _workflow(storage, content=buffer.getvalue()).save_sync(IMAGE_URL) == SaveSuccess()
    assert Image.open(BytesIO(storage.saved[0][0])).mode in ("RGB", "L")
