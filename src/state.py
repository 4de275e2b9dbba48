"""
Application state for Pet Gallery.

Holds the gallery value types shared by the services layer and the UI
adapters, plus the pygame screen's own UI state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


# **************************************************************** #
#                       Gallery Data                                 #
# **************************************************************** #


@dataclass(frozen=True)
class PetImage:
    """A single pet picture as served by the remote API."""

    url: str
    title: str = ""
    description: str = ""
    created: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PetImage":
        """
        Build a PetImage from a remote JSON record.

        Raises:
            ValueError: if the record is not an object or has no url
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        url = data.get("url")
        if not isinstance(url, str) or not url:
            raise ValueError("Image record is missing 'url'")
        return cls(
            url=url,
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            created=str(data.get("created") or ""),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "created": self.created,
        }

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title or description."""
        needle = query.lower()
        return needle in self.title.lower() or needle in self.description.lower()


# ---- Gallery state variants ---- #


@dataclass(frozen=True)
class Loading:
    """Initial state and the state of an in-flight refresh."""


@dataclass(frozen=True)
class Success:
    """Currently displayed (filtered and/or sorted) images."""

    images: Tuple[PetImage, ...] = ()


@dataclass(frozen=True)
class Error:
    """Last load failed; no images are carried."""

    message: str


GalleryState = Union[Loading, Success, Error]


# ---- Save outcome variants ---- #


@dataclass(frozen=True)
class SaveSuccess:
    """Image was written to device storage."""


@dataclass(frozen=True)
class SaveFailure:
    """Image could not be saved."""

    message: str


SaveOutcome = Union[SaveSuccess, SaveFailure]


# **************************************************************** #
#                       Screen UI State                              #
# **************************************************************** #


@dataclass
class SearchInputState:
    """State for the search bar."""

    active: bool = False
    text: str = ""


@dataclass
class ConfirmModalState:
    """State for the save confirmation modal."""

    show: bool = False
    title: str = ""
    message_lines: List[str] = field(default_factory=list)
    button_index: int = 0  # 0 = OK, 1 = Cancel
    data: Any = None  # Image the confirmation applies to


@dataclass
class UploadModalState:
    """State for the upload details modal."""

    show: bool = False
    fields: Dict[str, str] = field(
        default_factory=lambda: {"url": "", "title": "", "description": ""}
    )
    field_order: Tuple[str, ...] = ("url", "title", "description")
    focused: int = 0
    error: str = ""

    @property
    def focused_field(self) -> str:
        return self.field_order[self.focused]

    def reset(self):
        """Clear the form."""
        self.show = False
        self.fields = {name: "" for name in self.field_order}
        self.focused = 0
        self.error = ""


@dataclass
class ToastState:
    """Short-lived message shown after a save attempt."""

    message: str = ""
    is_error: bool = False
    expires_at: int = 0


class AppState:
    """
    UI state for the gallery screen.

    The gallery data itself lives in the session's state machine; this
    class only mirrors the latest published GalleryState so the render
    loop can read it without locking.
    """

    def __init__(self):
        # ---- Mirrored Core State ---- #
        self.gallery: GalleryState = Loading()
        self.sort_ascending: Optional[bool] = None

        # ---- Navigation State ---- #
        self.highlighted: int = 0
        self.scroll_offset: int = 0

        # ---- Search / Modals ---- #
        self.search = SearchInputState()
        self.confirm_modal = ConfirmModalState()
        self.upload_modal = UploadModalState()
        self.toast = ToastState()

        # ---- UI Rectangles ---- #
        self.item_rects: List[Any] = []
        self.rects: Dict[str, Any] = {}

        # ---- Runtime Flags ---- #
        self.running: bool = True

    @property
    def images(self) -> Tuple[PetImage, ...]:
        """Images currently on screen, empty unless the gallery loaded."""
        if isinstance(self.gallery, Success):
            return self.gallery.images
        return ()

    @property
    def highlighted_image(self) -> Optional[PetImage]:
        images = self.images
        if 0 <= self.highlighted < len(images):
            return images[self.highlighted]
        return None

    def apply_gallery_state(self, gallery: GalleryState):
        """Adopt a newly published gallery state, keeping the highlight in range."""
        self.gallery = gallery
        count = len(self.images)
        if self.highlighted >= count:
            self.highlighted = max(0, count - 1)

    def sync_intents(self, search_text: str, sort_ascending: Optional[bool]):
        """Mirror search/sort set by any adapter, the web companion included."""
        self.search.text = search_text
        self.sort_ascending = sort_ascending

    def any_modal_open(self) -> bool:
        return self.confirm_modal.show or self.upload_modal.show

    def close_all_modals(self):
        """Close all modal dialogs."""
        self.confirm_modal.show = False
        self.upload_modal.reset()
        self.search.active = False
