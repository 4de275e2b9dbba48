"""
Utility functions for Pet Gallery.
"""

from .logging import log_error, get_log_file, init_log_file
from .streams import StateStream, Broadcast

__all__ = [
    "log_error",
    "get_log_file",
    "init_log_file",
    "StateStream",
    "Broadcast",
]
