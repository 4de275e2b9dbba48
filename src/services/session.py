"""
Gallery session for Pet Gallery.

One session owns the state machine and save workflow for a screen's
lifetime. Adapters are handed the session instead of reaching for
module-level singletons.
"""

from typing import Any, Callable, Dict, Optional

from services.gallery import GalleryStateMachine
from services.pet_api import PetApiClient
from services.save_workflow import SaveWorkflow
from services.storage_saver import StorageSaver
from utils.platform import has_write_storage_permission


class GallerySession:
    """Explicitly constructed container for the gallery core."""

    def __init__(
        self,
        settings: Dict[str, Any],
        repository=None,
        storage_saver=None,
        has_permission: Optional[Callable[[], bool]] = None,
    ):
        self.settings = settings
        self.repository = repository or PetApiClient(
            base_url=settings.get("api_base_url", ""),
            timeout=settings.get("request_timeout", 10),
        )
        self.gallery = GalleryStateMachine(
            self.repository,
            filter_uploads=bool(settings.get("filter_uploads", False)),
        )
        self.saver = SaveWorkflow(
            storage_saver or StorageSaver(settings.get("pictures_dir", "")),
            has_permission=has_permission or has_write_storage_permission,
            timeout=settings.get("request_timeout", 10),
        )
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> bool:
        """Kick off the first load. Safe to call more than once."""
        if self._started:
            return False
        self._started = True
        return self.gallery.refresh()

    def close(self):
        """Tear the session down with its screen."""
        self.gallery.close()
        self.saver.close()
