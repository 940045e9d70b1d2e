import logging
from typing import Callable, Iterator, List, Optional

from pydantic import ValidationError

from clipshelf.database import KeyValueStore, StorageError
from clipshelf.models import ClipboardItem, decode_items, encode_items

logger = logging.getLogger(__name__)

ITEMS_KEY = "clipboardItems"
LEGACY_HISTORY_KEY = "clipboardHistory"


class ClipboardHistoryStore:
    """In-memory clipboard history mirrored to a shared key-value medium.

    The list is read whole by ``load`` and written whole after every
    mutation. Nothing coordinates two processes sharing a medium: the last
    one to save wins. No method raises on storage trouble; failures are
    logged and the in-memory list stays authoritative.
    """

    def __init__(self, backend: KeyValueStore):
        self.backend = backend
        self._items: List[ClipboardItem] = []

    @property
    def items(self) -> List[ClipboardItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ClipboardItem]:
        return iter(list(self._items))

    def load(self) -> List[ClipboardItem]:
        items = self._read_items()
        if items is not None:
            self._items = items
            logger.debug(f"Loaded {len(items)} clipboard items")
            return self.items

        try:
            history = self.backend.get_list(LEGACY_HISTORY_KEY) or []
        except StorageError as e:
            logger.warning(f"Clipboard history unreadable, starting empty: {e}")
            self._items = []
            return self.items

        self._items = [ClipboardItem(content=text) for text in history]
        logger.info(f"Migrated {len(self._items)} legacy clipboard entries")
        self.save()
        return self.items

    def _read_items(self) -> Optional[List[ClipboardItem]]:
        try:
            raw = self.backend.get(ITEMS_KEY)
        except StorageError as e:
            logger.warning(f"Failed to read {ITEMS_KEY}: {e}")
            return None
        if raw is None:
            return None

        try:
            return decode_items(raw)
        except ValidationError as e:
            logger.warning(f"Discarding undecodable {ITEMS_KEY}: {e.error_count()} errors")
            return None

    def save(self) -> None:
        try:
            self.backend.set(ITEMS_KEY, encode_items(self._items))
        except (StorageError, ValueError) as e:
            logger.warning(f"Failed to save {ITEMS_KEY}: {e}")

        try:
            self.backend.set_list(LEGACY_HISTORY_KEY, [item.content for item in self._items])
        except StorageError as e:
            logger.warning(f"Failed to save {LEGACY_HISTORY_KEY}: {e}")

    def capture_current(self, text: Optional[str]) -> Optional[ClipboardItem]:
        if not isinstance(text, str) or not text:
            return None
        if any(item.content == text for item in self._items):
            return None

        item = ClipboardItem(content=text)
        self._items.insert(0, item)
        logger.info(f"Captured clipboard text ({len(text)} chars)")
        self.save()
        return item

    def _index_of(self, item_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    def get(self, item_id: str) -> Optional[ClipboardItem]:
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None

    def toggle_pin(self, item_id: str) -> Optional[ClipboardItem]:
        index = self._index_of(item_id)
        if index is None:
            return None

        item = self._items[index]
        item.is_pinned = not item.is_pinned
        logger.debug(f"{'Pinned' if item.is_pinned else 'Unpinned'} {item.id}")
        self.save()
        return item

    def delete(self, item_id: str) -> bool:
        index = self._index_of(item_id)
        if index is None:
            return False

        del self._items[index]
        logger.debug(f"Deleted {item_id}")
        self.save()
        return True

    def clear(self) -> None:
        self._items.clear()
        logger.info("Cleared clipboard history")
        self.save()

    def filtered(self, predicate: Callable[[ClipboardItem], bool]) -> List[ClipboardItem]:
        return [item for item in self._items if predicate(item)]
