"""
UI Organisms - Complex UI sections.
Composed of multiple molecules working together.
"""

from .header import Header
from .grid import Grid
from .image_list import ImageList
from .modal_frame import ModalFrame

__all__ = [
    "Header",
    "Grid",
    "ImageList",
    "ModalFrame",
]
