"""
Upload form rules for Pet Gallery.

Shared by the pygame upload modal and the web companion so both
front ends accept the same input.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from state import PetImage

MISSING_FIELDS_MESSAGE = "Please fill in all fields"
REQUIRED_FIELDS = ("url", "title", "description")


def validate_upload(fields: Dict[str, Any]) -> Optional[str]:
    """
    Check the upload form.

    Returns:
        Error message, or None when every required field is filled in
    """
    for name in REQUIRED_FIELDS:
        value = fields.get(name)
        if not isinstance(value, str) or not value.strip():
            return MISSING_FIELDS_MESSAGE
    return None


def format_created(now: Optional[float] = None) -> str:
    """Display timestamp for a new upload."""
    if now is None:
        now = time.time()
    return datetime.fromtimestamp(now, tz=timezone.utc).strftime(
        "%a %b %d %H:%M:%S UTC %Y"
    )


def build_uploaded_image(fields: Dict[str, Any], now: Optional[float] = None) -> PetImage:
    """
    Turn a validated form into a PetImage stamped with the current time.

    Raises:
        ValueError: if the form does not validate
    """
    error = validate_upload(fields)
    if error:
        raise ValueError(error)
    return PetImage(
        url=fields["url"].strip(),
        title=fields["title"].strip(),
        description=fields["description"].strip(),
        created=format_created(now),
    )
