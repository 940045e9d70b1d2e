"""Service layer for clipshelf."""

from .capture_service import CaptureService
from .history_store import ITEMS_KEY, LEGACY_HISTORY_KEY, ClipboardHistoryStore
from .presenter import AppPresenter, HistoryPresenter, KeyboardPresenter, ViewMode

__all__ = [
    "AppPresenter",
    "CaptureService",
    "ClipboardHistoryStore",
    "HistoryPresenter",
    "ITEMS_KEY",
    "KeyboardPresenter",
    "LEGACY_HISTORY_KEY",
    "ViewMode",
]
