"""Runs the two-process scenarios against a live Redis server.

Skipped unless ``REDIS_URI`` points at a disposable database, e.g.
``REDIS_URI=redis://localhost:6379/15 pytest tests/test_redis_integration.py``.
"""

import os

import pytest
from ulid import ULID

from clipshelf.config import StoreConfig
from clipshelf.services import LEGACY_HISTORY_KEY, ClipboardHistoryStore

pytestmark = pytest.mark.skipif(not os.getenv("REDIS_URI"), reason="Integration test - set REDIS_URI to run")


@pytest.fixture
def make_backend():
    config = StoreConfig.from_uri(os.environ["REDIS_URI"])
    namespace = f"clipshelf-test-{ULID()}"
    created = []

    def factory():
        backend = StoreConfig(host=config.host, port=config.port, db=config.db, password=config.password,
                              ssl=config.ssl, namespace=namespace).create_backend()
        created.append(backend)
        return backend

    yield factory

    for backend in created:
        for key in backend.client.keys(f"{namespace}:*"):
            backend.client.delete(key)
        backend.close()


def test_two_processes_share_history(make_backend):
    app = ClipboardHistoryStore(make_backend())
    keyboard = ClipboardHistoryStore(make_backend())
    app.load()

    item = app.capture_current("shared")
    keyboard.load()
    keyboard.toggle_pin(item.id)

    assert app.load()[0].is_pinned is True
    assert app.backend.get_list(LEGACY_HISTORY_KEY) == ["shared"]


def test_legacy_list_migrates(make_backend):
    backend = make_backend()
    backend.set_list(LEGACY_HISTORY_KEY, ["a", "b"])

    items = ClipboardHistoryStore(backend).load()

    assert [item.content for item in items] == ["a", "b"]
    assert [item.content for item in ClipboardHistoryStore(make_backend()).load()] == ["a", "b"]
