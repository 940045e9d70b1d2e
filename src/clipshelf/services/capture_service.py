import logging
import threading
from typing import Callable, Optional

from clipshelf.clipboard import Pasteboard
from clipshelf.models import ClipboardItem

from .history_store import ClipboardHistoryStore

logger = logging.getLogger(__name__)


class CaptureService:
    """Polls the pasteboard and records new text in the history store.

    Polling happens on the thread that calls ``run_forever``; ``stop`` may be
    called from anywhere. Each change re-reads the shared list before
    capturing so saves from other processes are not overwritten by a stale copy.
    """

    def __init__(
        self,
        store: ClipboardHistoryStore,
        pasteboard: Pasteboard,
        on_capture: Optional[Callable[[ClipboardItem], None]] = None,
        poll_interval: float = 0.5,
    ) -> None:
        self.store = store
        self.pasteboard = pasteboard
        self._on_capture = on_capture or self._default_handler
        self.poll_interval = poll_interval
        self._stop_event = threading.Event()
        self._last_text: Optional[str] = None
        self._primed = False

    def poll_once(self) -> Optional[ClipboardItem]:
        text = self.pasteboard.read_text()

        if not self._primed:
            self._last_text = text
            self._primed = True
            return None

        if not text or text == self._last_text:
            return None
        self._last_text = text

        self.store.load()
        item = self.store.capture_current(text)
        if item is not None:
            try:
                self._on_capture(item)
            except Exception as e:
                logger.error(f"Error in on_capture: {e}")
        return item

    def run_forever(self) -> None:
        self._stop_event.clear()
        logger.info(f"Watching the pasteboard every {self.poll_interval}s")
        try:
            while not self._stop_event.is_set():
                self.poll_once()
                self._stop_event.wait(self.poll_interval)
        except KeyboardInterrupt:
            pass
        finally:
            logger.info("Stopped watching the pasteboard")

    def stop(self) -> None:
        self._stop_event.set()

    @staticmethod
    def _default_handler(item: ClipboardItem) -> None:
        pass
