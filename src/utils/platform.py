"""
Platform helpers for Pet Gallery.

Android detection, API level lookup and the shared-storage write
permission check. The android/jnius modules only exist inside the
python-for-android runtime, so they are imported on demand.
"""

import os
import sys
import traceback
from typing import Optional

from utils.logging import log_error

# MediaStore scoped storage replaced direct writes in Android 10 (API 29)
SCOPED_STORAGE_API_LEVEL = 29


def is_android() -> bool:
    """
    True when running on an Android device.

    ANDROID_BUILD only selects the fullscreen layout; main.py sets it on
    desktop runs too, so it is not used here.
    """
    return "ANDROID_ARGUMENT" in os.environ or hasattr(sys, "getandroidapilevel")


def android_api_level() -> Optional[int]:
    """Return the device API level, or None off Android."""
    if not is_android():
        return None
    if hasattr(sys, "getandroidapilevel"):
        return sys.getandroidapilevel()
    try:
        from jnius import autoclass

        return int(autoclass("android.os.Build$VERSION").SDK_INT)
    except ImportError:
        return None


def uses_scoped_storage() -> bool:
    level = android_api_level()
    return level is not None and level >= SCOPED_STORAGE_API_LEVEL


def has_write_storage_permission() -> bool:
    """
    Check whether the app may write to shared picture storage.

    Scoped storage (API 29+) needs no grant for inserting into MediaStore,
    and desktop builds never need one. Older Android versions require
    WRITE_EXTERNAL_STORAGE.
    """
    if not is_android() or uses_scoped_storage():
        return True
    try:
        from android.permissions import Permission, check_permission

        return bool(check_permission(Permission.WRITE_EXTERNAL_STORAGE))
    except ImportError as e:
        log_error(
            "Android permissions module unavailable",
            type(e).__name__,
            traceback.format_exc(),
        )
        return False


def request_storage_permissions() -> None:
    """Ask the user for storage access on pre-scoped-storage Android."""
    if not is_android() or uses_scoped_storage():
        return
    try:
        from android.permissions import Permission, request_permissions

        request_permissions(
            [
                Permission.WRITE_EXTERNAL_STORAGE,
                Permission.READ_EXTERNAL_STORAGE,
            ]
        )
    except ImportError as e:
        log_error(
            "Android permissions module unavailable",
            type(e).__name__,
            traceback.format_exc(),
        )


def default_pictures_dir() -> str:
    """Public Pictures directory for direct file writes."""
    if is_android():
        try:
            from jnius import autoclass

            environment = autoclass("android.os.Environment")
            return str(
                environment.getExternalStoragePublicDirectory(
                    environment.DIRECTORY_PICTURES
                ).getAbsolutePath()
            )
        except ImportError:
            pass
    return os.path.join(os.path.expanduser("~"), "Pictures")
