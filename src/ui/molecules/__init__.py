"""
UI Molecules - Combinations of atoms.
Simple groups of atoms functioning together.
"""

from .action_button import ActionButton
from .thumbnail import Thumbnail
from .image_row import ImageRow
from .search_bar import SearchBar
from .status_panel import StatusPanel
from .toast import Toast

__all__ = [
    "ActionButton",
    "Thumbnail",
    "ImageRow",
    "SearchBar",
    "StatusPanel",
    "Toast",
]
