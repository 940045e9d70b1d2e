from .clipboard_item import ClipboardItem, decode_items, encode_items, new_item_id

__all__ = ["ClipboardItem", "decode_items", "encode_items", "new_item_id"]
