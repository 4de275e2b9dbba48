"""
UI Screens - Full page components with data binding.
The final layer of the atomic design hierarchy.
"""

from .gallery_grid_screen import GalleryGridScreen
from .gallery_list_screen import GalleryListScreen
from .screen_manager import ScreenManager

__all__ = [
    'GalleryGridScreen',
    'GalleryListScreen',
    'ScreenManager',
]
