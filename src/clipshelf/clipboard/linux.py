import os
import shutil
import subprocess
from typing import List, Optional

from .base import Pasteboard


class LinuxPasteboard(Pasteboard):
    """Text pasteboard through ``wl-paste``/``wl-copy`` on Wayland, ``xclip`` on X11."""

    def _read_text(self) -> Optional[str]:
        strategies = (
            self._from_wayland,
            self._from_xclip,
        )

        for strategy in strategies:
            data = strategy()
            if data is not None:
                return data.decode("utf-8", errors="ignore")
        return None

    def _from_wayland(self) -> Optional[bytes]:
        if not os.environ.get("WAYLAND_DISPLAY") or not shutil.which("wl-paste"):
            return None
        return self._run_command(["wl-paste", "--no-newline", "--type", "text/plain"], timeout=1.5)

    def _from_xclip(self) -> Optional[bytes]:
        if not shutil.which("xclip"):
            return None
        return self._run_command(["xclip", "-selection", "clipboard", "-o"], timeout=1.5)

    def _run_command(self, command: List[str], timeout: float, data: Optional[bytes] = None) -> Optional[bytes]:
        try:
            result = subprocess.run(
                command,
                input=data,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=timeout,
            )
            return result.stdout
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
            return None

    def _write_text(self, text: str) -> bool:
        payload = text.encode("utf-8")

        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
            return self._run_command(["wl-copy"], timeout=2.0, data=payload) is not None
        if shutil.which("xclip"):
            return self._run_command(["xclip", "-selection", "clipboard"], timeout=2.0, data=payload) is not None
        return False
