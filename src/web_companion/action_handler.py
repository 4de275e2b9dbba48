"""
Action handler for Web Companion.

Processes actions received from the phone browser and translates them
into gallery intents.
"""

from services.upload_form import build_uploaded_image, validate_upload
from utils.logging import log_error


def handle_action(session, action_data):
    """
    Process a single action from the web companion.

    Args:
        session: GallerySession instance
        action_data: dict with "action" key and action-specific fields

    Returns:
        True if the action was routed to an intent, False if it was ignored
    """
    if not isinstance(action_data, dict):
        return False

    action = action_data.get("action", "")
    gallery = session.gallery

    if action == "refresh":
        return gallery.refresh()

    elif action == "search":
        text = action_data.get("text", "")
        gallery.set_search_text(text if isinstance(text, str) else str(text))
        return True

    elif action == "sort":
        ascending = _parse_sort(action_data)
        if ascending is None:
            return False
        gallery.set_sort_order(ascending)
        return True

    elif action == "add_image":
        fields = {
            "url": action_data.get("url"),
            "title": action_data.get("title"),
            "description": action_data.get("description"),
        }
        error = validate_upload(fields)
        if error:
            log_error(f"Rejected upload from web companion: {error}")
            return False
        gallery.add_image(build_uploaded_image(fields))
        return True

    elif action == "save":
        url = _resolve_save_url(gallery, action_data)
        if not url:
            return False
        session.saver.save(url)
        return True

    return False


def _parse_sort(action_data):
    """Accept {"order": "asc"|"desc"} or {"ascending": bool}."""
    if "ascending" in action_data:
        return bool(action_data["ascending"])
    order = str(action_data.get("order", "")).lower()
    if order in ("asc", "a-z"):
        return True
    if order in ("desc", "z-a"):
        return False
    return None


def _resolve_save_url(gallery, action_data):
    """Save by explicit url, or by index into the displayed images."""
    url = action_data.get("url")
    if isinstance(url, str) and url:
        return url
    index = action_data.get("index")
    if isinstance(index, int):
        displayed = gallery.displayed
        if 0 <= index < len(displayed):
            return displayed[index].url
    return None
