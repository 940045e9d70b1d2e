import threading

from clipshelf.clipboard import MemoryPasteboard
from clipshelf.services import CaptureService


def test_first_poll_only_primes(store):
    service = CaptureService(store, MemoryPasteboard("already there"))
    assert service.poll_once() is None
    assert len(store) == 0


def test_new_text_is_captured_once(store):
    pasteboard = MemoryPasteboard("start")
    captured = []
    service = CaptureService(store, pasteboard, on_capture=captured.append)
    service.poll_once()

    pasteboard.text = "copied"
    item = service.poll_once()
    assert item is not None and item.content == "copied"
    assert service.poll_once() is None
    assert captured == [item]


def test_reloads_before_capturing(store, other_store):
    pasteboard = MemoryPasteboard()
    service = CaptureService(other_store, pasteboard)
    service.poll_once()

    store.capture_current("saved by the app")
    pasteboard.text = "watched"
    service.poll_once()

    assert [item.content for item in store.load()] == ["watched", "saved by the app"]


def test_known_text_is_not_recaptured(store):
    store.capture_current("old")
    pasteboard = MemoryPasteboard()
    service = CaptureService(store, pasteboard)
    service.poll_once()

    pasteboard.text = "old"
    assert service.poll_once() is None
    assert len(store) == 1


def test_callback_errors_are_contained(store):
    pasteboard = MemoryPasteboard()

    def explode(item):
        raise RuntimeError("boom")

    service = CaptureService(store, pasteboard, on_capture=explode)
    service.poll_once()
    pasteboard.text = "still saved"

    assert service.poll_once() is not None
    assert store.load()[0].content == "still saved"


def test_run_forever_stops(store):
    service = CaptureService(store, MemoryPasteboard(), poll_interval=0.01)
    timer = threading.Timer(0.05, service.stop)
    timer.start()
    service.run_forever()
    timer.join()
