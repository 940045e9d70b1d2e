from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from ulid import ULID


def new_item_id() -> str:
    return f"i_{ULID()}"


class ClipboardItem(BaseModel):
    """One remembered piece of copied text plus its pin flag.

    ``id`` is the identity used for every lookup; two items with the same
    ``content`` are still different items.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    content: str = Field(frozen=True)
    is_pinned: bool = Field(default=False, alias="isPinned")
    id: str = Field(default_factory=new_item_id, frozen=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class _StoredItem(BaseModel):
    """Shape of one entry as written by ``encode_items``; every field required, no coercion."""

    model_config = ConfigDict(strict=True)

    content: str
    isPinned: bool
    id: str


_ITEM_LIST = TypeAdapter(List[ClipboardItem])
_STORED_LIST = TypeAdapter(List[_StoredItem])


def encode_items(items: Sequence[ClipboardItem]) -> str:
    return _ITEM_LIST.dump_json(list(items), by_alias=True).decode("utf-8")


def decode_items(raw: str) -> List[ClipboardItem]:
    """Parse a serialized item list; raises ``pydantic.ValidationError``."""
    return [
        ClipboardItem(content=stored.content, is_pinned=stored.isPinned, id=stored.id)
        for stored in _STORED_LIST.validate_json(raw)
    ]
