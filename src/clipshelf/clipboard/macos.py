import shutil
import subprocess
from typing import Optional

try:
    from AppKit import NSPasteboard, NSPasteboardTypeString
    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False

from .base import Pasteboard


class MacOSPasteboard(Pasteboard):
    """``NSPasteboard`` via PyObjC, falling back to ``pbpaste``/``pbcopy``."""

    def _read_text(self) -> Optional[str]:
        if HAS_APPKIT:
            pasteboard = NSPasteboard.generalPasteboard()
            text = pasteboard.stringForType_(NSPasteboardTypeString)
            return str(text) if text is not None else None

        if not shutil.which("pbpaste"):
            return None
        result = subprocess.run(["pbpaste"], stdout=subprocess.PIPE, check=True, timeout=1.5)
        return result.stdout.decode("utf-8", errors="ignore")

    def _write_text(self, text: str) -> bool:
        if HAS_APPKIT:
            pasteboard = NSPasteboard.generalPasteboard()
            pasteboard.clearContents()
            return bool(pasteboard.setString_forType_(text, NSPasteboardTypeString))

        if not shutil.which("pbcopy"):
            return False
        subprocess.run(["pbcopy"], input=text.encode("utf-8"), check=True, timeout=2.0)
        return True
