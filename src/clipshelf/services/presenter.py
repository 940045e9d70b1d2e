import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional, Tuple

from clipshelf.clipboard import Pasteboard
from clipshelf.models import ClipboardItem

from .history_store import ClipboardHistoryStore

logger = logging.getLogger(__name__)


class ViewMode(str, Enum):
    ALL = "all"
    PINNED = "pinned"
    TEMPORARY = "temporary"

    def matches(self, item: ClipboardItem) -> bool:
        if self is ViewMode.PINNED:
            return item.is_pinned
        if self is ViewMode.TEMPORARY:
            return not item.is_pinned
        return True


class HistoryPresenter(ABC):
    """Shows one view of the shared history and forwards user intents to the store.

    Rows are addressed by position in the current view; the store is always
    addressed by item id, so a row maps back to the right item whatever the
    mode hides.
    """

    modes: Tuple[ViewMode, ...] = (ViewMode.ALL, ViewMode.PINNED)

    def __init__(self, store: ClipboardHistoryStore, pasteboard: Pasteboard, mode: Optional[ViewMode] = None):
        self.store = store
        self.pasteboard = pasteboard
        self.mode = self.modes[0]
        if mode is not None:
            self.set_mode(mode)

    def set_mode(self, mode: ViewMode) -> None:
        if mode not in self.modes:
            raise ValueError(f"{type(self).__name__} does not offer the {mode.value!r} view")
        self.mode = mode

    def appear(self) -> List[ClipboardItem]:
        return self.refresh()

    def refresh(self) -> List[ClipboardItem]:
        self.store.load()
        return self.rows()

    def rows(self) -> List[ClipboardItem]:
        return self.store.filtered(self.mode.matches)

    def row(self, index: int) -> Optional[ClipboardItem]:
        rows = self.rows()
        if 0 <= index < len(rows):
            return rows[index]
        return None

    def capture_pasteboard(self) -> Optional[ClipboardItem]:
        return self.store.capture_current(self.pasteboard.read_text())

    def toggle_pin(self, item_id: str) -> Optional[ClipboardItem]:
        return self.store.toggle_pin(item_id)

    def delete(self, item_id: str) -> bool:
        return self.store.delete(item_id)

    @abstractmethod
    def select(self, item_id: str) -> bool:
        pass


class AppPresenter(HistoryPresenter):
    """Host-application view: everything or pinned only; selecting copies back out."""

    modes = (ViewMode.ALL, ViewMode.PINNED)

    def select(self, item_id: str) -> bool:
        item = self.store.get(item_id)
        if item is None:
            return False
        return self.pasteboard.write_text(item.content)

    def clear(self) -> None:
        self.store.clear()


class KeyboardPresenter(HistoryPresenter):
    """Keyboard view: unpinned or pinned items; selecting types the text at the cursor.

    Every appearance reloads the shared list and captures whatever text is
    on the pasteboard at that moment.
    """

    modes = (ViewMode.TEMPORARY, ViewMode.PINNED)

    def __init__(self, store: ClipboardHistoryStore, pasteboard: Pasteboard,
                 insert_text: Callable[[str], None], mode: Optional[ViewMode] = None):
        super().__init__(store, pasteboard, mode)
        self.insert_text = insert_text

    def appear(self) -> List[ClipboardItem]:
        self.refresh()
        self.capture_pasteboard()
        return self.rows()

    def select(self, item_id: str) -> bool:
        item = self.store.get(item_id)
        if item is None:
            return False
        self.insert_text(item.content)
        return True
