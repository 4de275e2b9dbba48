"""
UI Atoms - Basic building blocks.
Smallest UI components with no dependencies on other components.
"""

from .text import Text
from .button import Button
from .spinner import Spinner

__all__ = [
    'Text',
    'Button',
    'Spinner',
]
