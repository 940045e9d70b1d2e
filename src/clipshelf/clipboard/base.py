import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


class Pasteboard(ABC):
    """The system's global text pasteboard.

    ``read_text`` and ``write_text`` never raise: a pasteboard that cannot be
    reached reads as empty and rejects writes.
    """

    @abstractmethod
    def _read_text(self) -> Optional[str]:
        pass

    @abstractmethod
    def _write_text(self, text: str) -> bool:
        pass

    def read_text(self) -> Optional[str]:
        try:
            return self._read_text()
        except Exception as e:
            logger.debug(f"Pasteboard read failed: {e}")
            return None

    def write_text(self, text: str) -> bool:
        try:
            return self._write_text(text)
        except Exception as e:
            logger.error(f"Pasteboard write failed: {e}")
            return False


class MemoryPasteboard(Pasteboard):

    def __init__(self, text: Optional[str] = None):
        self.text = text

    def _read_text(self) -> Optional[str]:
        return self.text

    def _write_text(self, text: str) -> bool:
        self.text = text
        return True
