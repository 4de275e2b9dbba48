"""
UI Modal Screens - Modal dialog page components.
"""

from .confirm_modal import ConfirmModal
from .upload_modal import UploadModal

__all__ = [
    'ConfirmModal',
    'UploadModal',
]
