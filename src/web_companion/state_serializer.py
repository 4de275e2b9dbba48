"""
State serializer for Web Companion.

Turns the gallery state and the last save outcome into JSON-friendly
dicts for the phone client.
"""

from typing import Any, Dict, Optional

from services.save_workflow import SAVE_SUCCESS_MESSAGE
from state import Error, GalleryState, Loading, SaveFailure, SaveOutcome, Success


def serialize_gallery_state(
    gallery: GalleryState,
    search_text: str = "",
    sort_ascending: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Serialize a gallery state variant.

    Returns a dict with:
        - status: "loading", "success" or "error"
        - images: list of image dicts (success only)
        - message: error message (error only)
        - search: current search text
        - sort: "asc", "desc" or None
    """
    result: Dict[str, Any] = {
        "search": search_text,
        "sort": None if sort_ascending is None else ("asc" if sort_ascending else "desc"),
    }

    if isinstance(gallery, Loading):
        result["status"] = "loading"
    elif isinstance(gallery, Success):
        result["status"] = "success"
        result["images"] = [image.to_dict() for image in gallery.images]
    elif isinstance(gallery, Error):
        result["status"] = "error"
        result["message"] = gallery.message
    else:
        raise TypeError(f"Unknown gallery state: {gallery!r}")

    return result


def serialize_save_outcome(outcome: SaveOutcome) -> Dict[str, Any]:
    """Serialize a save outcome as {"ok": bool, "message": str}."""
    if isinstance(outcome, SaveFailure):
        return {"ok": False, "message": outcome.message}
    return {"ok": True, "message": SAVE_SUCCESS_MESSAGE}


def serialize_web_state(session, last_outcome: Optional[SaveOutcome] = None) -> Dict[str, Any]:
    """
    Full payload served at /api/state and over /api/events.

    Args:
        session: GallerySession to read from
        last_outcome: Most recent save outcome, if any
    """
    gallery = session.gallery
    payload = serialize_gallery_state(
        gallery.state, gallery.search_text, gallery.sort_ascending
    )
    payload["last_save"] = (
        serialize_save_outcome(last_outcome) if last_outcome is not None else None
    )
    return payload
