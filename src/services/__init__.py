"""
Services layer for Pet Gallery.
Handles the remote API, gallery state, saving and storage.
"""

from .pet_api import (
    PetApiClient,
    NetworkError,
    NoConnectivity,
    Timeout,
    OtherNetworkError,
)
from .gallery import GalleryStateMachine
from .storage_saver import (
    StorageSaver,
    StorageError,
    StoragePermissionDenied,
    StorageOutOfMemory,
    StorageIOFailure,
)
from .save_workflow import SaveWorkflow, DecodeError
from .session import GallerySession
from .upload_form import validate_upload, build_uploaded_image, MISSING_FIELDS_MESSAGE

__all__ = [
    # Remote API
    'PetApiClient',
    'NetworkError',
    'NoConnectivity',
    'Timeout',
    'OtherNetworkError',
    # Gallery
    'GalleryStateMachine',
    'GallerySession',
    # Uploads
    'validate_upload',
    'build_uploaded_image',
    'MISSING_FIELDS_MESSAGE',
    # Saving
    'SaveWorkflow',
    'DecodeError',
    'StorageSaver',
    'StorageError',
    'StoragePermissionDenied',
    'StorageOutOfMemory',
    'StorageIOFailure',
]
