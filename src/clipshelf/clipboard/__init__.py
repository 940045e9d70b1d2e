from .base import MemoryPasteboard, Pasteboard
from .factory import get_pasteboard, get_pasteboard_class

__all__ = [
    'MemoryPasteboard',
    'Pasteboard',
    'get_pasteboard',
    'get_pasteboard_class',
]
