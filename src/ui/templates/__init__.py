"""
UI Templates - Page layouts.
Compositions of organisms into complete page structures.
"""

from .gallery_screen import GalleryScreenTemplate

__all__ = [
    "GalleryScreenTemplate",
]
