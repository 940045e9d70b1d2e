import json

import pytest
from pydantic import ValidationError

from clipshelf.models import ClipboardItem, decode_items, encode_items


def test_new_item_defaults():
    item = ClipboardItem(content="hello")
    assert item.content == "hello"
    assert item.is_pinned is False
    assert item.id.startswith("i_")


def test_ids_are_unique():
    ids = {ClipboardItem(content="same").id for _ in range(100)}
    assert len(ids) == 100


def test_content_and_id_are_immutable():
    item = ClipboardItem(content="hello")
    with pytest.raises(ValidationError):
        item.content = "changed"
    with pytest.raises(ValidationError):
        item.id = "other"


def test_pin_flag_is_mutable():
    item = ClipboardItem(content="hello")
    item.is_pinned = True
    assert item.is_pinned is True


def test_encoded_shape_uses_stored_field_names():
    item = ClipboardItem(content="hello", isPinned=True, id="abc")
    assert json.loads(encode_items([item])) == [{"content": "hello", "isPinned": True, "id": "abc"}]
    assert item.to_dict() == {"content": "hello", "isPinned": True, "id": "abc"}


def test_decode_accepts_stored_documents():
    raw = '[{"content": "a", "isPinned": false, "id": "1"}, {"content": "b", "isPinned": true, "id": "2"}]'
    items = decode_items(raw)
    assert [(i.content, i.is_pinned, i.id) for i in items] == [("a", False, "1"), ("b", True, "2")]


@pytest.mark.parametrize("raw", [
    "not json",
    "{}",
    '[{"isPinned": false, "id": "1"}]',
    '[{"content": 5, "isPinned": false, "id": "1"}]',
    '[{"content": "a"}]',
    '[{"content": "a", "isPinned": false}]',
    '[{"content": "a", "id": "1"}]',
    '[{"content": "a", "isPinned": "yes", "id": "1"}]',
    '[{"content": "a", "isPinned": 1, "id": "1"}]',
    '[{"content": "a", "isPinned": false, "id": 7}]',
])
def test_decode_rejects_malformed_documents(raw):
    with pytest.raises(ValidationError):
        decode_items(raw)
