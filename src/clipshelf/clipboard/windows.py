from typing import Optional

import win32clipboard as wc
import win32con

from .base import Pasteboard


class WindowsPasteboard(Pasteboard):

    def _read_text(self) -> Optional[str]:
        wc.OpenClipboard()
        try:
            if not wc.IsClipboardFormatAvailable(win32con.CF_UNICODETEXT):
                return None
            return wc.GetClipboardData(win32con.CF_UNICODETEXT)
        finally:
            wc.CloseClipboard()

    def _write_text(self, text: str) -> bool:
        wc.OpenClipboard()
        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(win32con.CF_UNICODETEXT, text)
            return True
        finally:
            wc.CloseClipboard()
