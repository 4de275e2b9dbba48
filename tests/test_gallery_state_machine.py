"""Tests for the gallery state machine.

The repository is replaced with small fakes; refreshes run synchronously
unless a test is specifically about the background thread.
"""

import os
import sys
import threading

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services.gallery import (
    GalleryStateMachine,
    NO_CONNECTIVITY_MESSAGE,
    TIMEOUT_MESSAGE,
    filter_images,
    sort_images,
)
from services.pet_api import NoConnectivity, OtherNetworkError, Timeout
from state import Error, Loading, PetImage, Success


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

def _img(title, description="", url=None):
    return PetImage(
        url=url or f"https://example.com/{title.lower().replace(' ', '_')}.jpg",
        title=title,
        description=description,
        created="Tue Aug 25 10:00:00 UTC 2020",
    )


class FakeRepository:
    """Returns a fixed list, or raises a fixed error."""

    def __init__(self, images=None, error=None):
        self.images = list(images or [])
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.images)


class BlockingRepository(FakeRepository):
    """fetch() waits until release() is called."""

    def __init__(self, images=None, error=None):
        super().__init__(images, error)
        self.started = threading.Event()
        self._release = threading.Event()

    def release(self):
        self._release.set()

    def fetch(self):
        self.started.set()
        assert self._release.wait(5), "test never released the fetch"
        return super().fetch()


def _titles(state):
    assert isinstance(state, Success), f"Expected Success, got {state!r}"
    return [image.title for image in state.images]


def _recorder(machine):
    seen = []
    machine.subscribe(seen.append)
    return seen


# ---------------------------------------------------------------------------
# Refresh
# ---------------------------------------------------------------------------

def test_initial_state_is_loading():
    """A new machine is Loading before any fetch lands."""
    machine = GalleryStateMachine(FakeRepository())
    assert isinstance(machine.state, Loading)


def test_refresh_success_publishes_images():
    """One image titled 'Barky Spears' ends up as Success([image])."""
    image = _img("Barky Spears")
    machine = GalleryStateMachine(FakeRepository([image]))

    assert machine.refresh_sync() is True
    assert machine.state == Success((image,))


def test_refresh_publishes_loading_then_success():
    """Subscribers see Loading before the result."""
    machine = GalleryStateMachine(FakeRepository([_img("Rex")]))
    seen = _recorder(machine)

    machine.refresh_sync()

    assert isinstance(seen[0], Loading)  # replayed initial state
    assert isinstance(seen[1], Loading)
    assert _titles(seen[-1]) == ["Rex"]


def test_refresh_no_connectivity_message():
    """A connectivity failure becomes the no-internet message."""
    machine = GalleryStateMachine(FakeRepository(error=NoConnectivity("dns")))
    machine.refresh_sync()
    assert machine.state == Error("No Internet Connection. Please try again later.")
    assert machine.state.message == NO_CONNECTIVITY_MESSAGE


def test_refresh_timeout_message():
    machine = GalleryStateMachine(FakeRepository(error=Timeout("slow")))
    machine.refresh_sync()
    assert machine.state == Error(TIMEOUT_MESSAGE)
    assert TIMEOUT_MESSAGE == "Request Timeout. Please try again."


def test_refresh_other_network_error_message():
    machine = GalleryStateMachine(FakeRepository(error=OtherNetworkError("HTTP 500")))
    machine.refresh_sync()
    assert machine.state == Error("Failed to load images: HTTP 500")


def test_refresh_generic_exception_message():
    """Non-network exceptions are reported with their text, never raised."""
    machine = GalleryStateMachine(FakeRepository(error=RuntimeError("boom")))
    machine.refresh_sync()
    assert machine.state == Error("Failed to load images: boom")


def test_refresh_after_error_recovers():
    repo = FakeRepository(error=NoConnectivity("offline"))
    machine = GalleryStateMachine(repo)
    machine.refresh_sync()
    assert isinstance(machine.state, Error)

    repo.error = None
    repo.images = [_img("Annie")]
    machine.refresh_sync()
    assert _titles(machine.state) == ["Annie"]


def test_refresh_replaces_baseline_and_drops_uploads():
    machine = GalleryStateMachine(FakeRepository([_img("Rex")]))
    machine.refresh_sync()
    machine.add_image(_img("Uploaded"))
    assert _titles(machine.state) == ["Rex", "Uploaded"]

    machine.refresh_sync()
    assert _titles(machine.state) == ["Rex"]
    assert [i.title for i in machine.baseline] == ["Rex"]


def test_background_refresh_completes():
    machine = GalleryStateMachine(FakeRepository([_img("Rex")]))
    assert machine.refresh() is True
    assert machine.wait_for_refresh(5)
    assert _titles(machine.state) == ["Rex"]


def test_second_refresh_rejected_while_in_flight():
    """Only one fetch runs at a time."""
    repo = BlockingRepository([_img("Rex")])
    machine = GalleryStateMachine(repo)

    assert machine.refresh() is True
    assert repo.started.wait(5)
    assert machine.is_refreshing
    assert machine.refresh() is False
    assert machine.refresh_sync() is False

    repo.release()
    assert machine.wait_for_refresh(5)
    assert repo.calls == 1
    assert machine.refresh() is True
    machine.wait_for_refresh(5)
    assert repo.calls == 2


def test_search_during_refresh_applies_to_result():
    """Search typed while loading filters the images that arrive later."""
    repo = BlockingRepository([_img("Annie"), _img("Zeus"), _img("Annabel")])
    machine = GalleryStateMachine(repo)

    machine.refresh()
    assert repo.started.wait(5)
    machine.set_search_text("ann")
    # Published immediately, over an empty baseline
    assert machine.state == Success(())

    repo.release()
    machine.wait_for_refresh(5)
    assert _titles(machine.state) == ["Annie", "Annabel"]


def test_sort_before_first_load_applies_to_result():
    machine = GalleryStateMachine(FakeRepository([_img("Zeus"), _img("Annie")]))
    seen = _recorder(machine)

    machine.set_sort_order(True)
    assert len(seen) == 1, "sorting before any load must not publish"

    machine.refresh_sync()
    assert _titles(machine.state) == ["Annie", "Zeus"]


def test_close_drops_late_results():
    repo = BlockingRepository([_img("Rex")])
    machine = GalleryStateMachine(repo)
    seen = _recorder(machine)

    machine.refresh()
    assert repo.started.wait(5)
    machine.close()
    repo.release()
    machine.wait_for_refresh(5)

    assert isinstance(machine.state, Loading)
    assert all(isinstance(s, Loading) for s in seen)


def test_intents_ignored_after_close():
    machine = GalleryStateMachine(FakeRepository([_img("Rex")]))
    machine.refresh_sync()
    machine.close()

    assert machine.refresh() is False
    machine.set_search_text("zzz")
    machine.add_image(_img("Late"))
    assert _titles(machine.state) == ["Rex"]


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def test_search_matches_title_or_description_case_insensitive():
    images = [
        _img("Barky Spears", "A very good boy"),
        _img("Whiskers", "Sleeps all day"),
        _img("Zeus", "BARKS at mail"),
    ]
    machine = GalleryStateMachine(FakeRepository(images))
    machine.refresh_sync()

    machine.set_search_text("bark")
    assert _titles(machine.state) == ["Barky Spears", "Zeus"]


def test_search_result_is_subset_of_baseline():
    images = [_img("Annie"), _img("Zeus"), _img("Bella")]
    machine = GalleryStateMachine(FakeRepository(images))
    machine.refresh_sync()

    for query in ("a", "e", "zz", "ANN"):
        machine.set_search_text(query)
        for image in machine.state.images:
            assert image in images
            assert image.matches(query)


def test_empty_search_restores_baseline():
    images = [_img("Annie"), _img("Zeus")]
    machine = GalleryStateMachine(FakeRepository(images))
    machine.refresh_sync()

    machine.set_search_text("zeus")
    machine.set_search_text("")
    assert _titles(machine.state) == ["Annie", "Zeus"]


def test_search_is_reapplied_from_baseline():
    """Narrowing then widening a query does not lose images."""
    machine = GalleryStateMachine(FakeRepository([_img("Annie"), _img("Anna")]))
    machine.refresh_sync()

    machine.set_search_text("annie")
    machine.set_search_text("ann")
    assert _titles(machine.state) == ["Annie", "Anna"]


def test_search_keeps_active_sort():
    machine = GalleryStateMachine(
        FakeRepository([_img("Zeus"), _img("Annie"), _img("Zara")])
    )
    machine.refresh_sync()
    machine.set_sort_order(False)

    machine.set_search_text("z")
    assert _titles(machine.state) == ["Zeus", "Zara"]


def test_filter_images_helper():
    images = [_img("Rex", "dog"), _img("Tom", "cat")]
    assert filter_images(images, "") == images
    assert filter_images(images, "CAT") == [images[1]]


# ---------------------------------------------------------------------------
# Sort
# ---------------------------------------------------------------------------

def test_sort_ascending_then_descending():
    """Baseline Zeus, Annie sorts both ways."""
    machine = GalleryStateMachine(FakeRepository([_img("Zeus"), _img("Annie")]))
    machine.refresh_sync()

    machine.set_sort_order(True)
    assert _titles(machine.state) == ["Annie", "Zeus"]

    machine.set_sort_order(False)
    assert _titles(machine.state) == ["Zeus", "Annie"]


def test_sort_is_idempotent():
    machine = GalleryStateMachine(
        FakeRepository([_img("Bella"), _img("Annie"), _img("Zeus")])
    )
    machine.refresh_sync()

    machine.set_sort_order(True)
    first = machine.state
    machine.set_sort_order(True)
    assert machine.state == first


def test_sort_is_stable_for_equal_titles():
    a = _img("Rex", url="https://example.com/1.jpg")
    b = _img("Rex", url="https://example.com/2.jpg")
    assert sort_images([a, b], True) == [a, b]
    assert sort_images([a, b], False) == [a, b]


def test_sort_operates_on_filtered_list():
    machine = GalleryStateMachine(
        FakeRepository([_img("Zeus"), _img("Annie"), _img("Zara")])
    )
    machine.refresh_sync()
    machine.set_search_text("z")

    machine.set_sort_order(True)
    assert _titles(machine.state) == ["Zara", "Zeus"]


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------

def test_add_image_appends_to_displayed():
    machine = GalleryStateMachine(FakeRepository([_img("Rex")]))
    machine.refresh_sync()

    machine.add_image(_img("New Pet"))
    assert _titles(machine.state) == ["Rex", "New Pet"]
    assert len(machine.baseline) == 2


def test_add_image_ignores_active_filter_by_default():
    """Uploads show up even when the query would hide them."""
    machine = GalleryStateMachine(FakeRepository([_img("Annie"), _img("Zeus")]))
    machine.refresh_sync()
    machine.set_search_text("annie")

    machine.add_image(_img("Rex"))
    assert _titles(machine.state) == ["Annie", "Rex"]


def test_add_image_reapplies_filter_when_enabled():
    machine = GalleryStateMachine(
        FakeRepository([_img("Annie"), _img("Zeus")]), filter_uploads=True
    )
    machine.refresh_sync()
    machine.set_search_text("annie")

    machine.add_image(_img("Rex"))
    assert _titles(machine.state) == ["Annie"]

    machine.add_image(_img("Annie Two"))
    assert _titles(machine.state) == ["Annie", "Annie Two"]


def test_add_image_before_first_load():
    machine = GalleryStateMachine(FakeRepository())
    machine.add_image(_img("Rex"))
    assert _titles(machine.state) == ["Rex"]
