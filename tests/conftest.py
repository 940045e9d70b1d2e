import pytest

from clipshelf.clipboard import MemoryPasteboard
from clipshelf.database import MemoryStore
from clipshelf.services import ClipboardHistoryStore


@pytest.fixture
def shared_data():
    """The raw medium both simulated processes point at."""
    return {}


@pytest.fixture
def backend(shared_data):
    return MemoryStore(data=shared_data)


@pytest.fixture
def store(backend):
    history = ClipboardHistoryStore(backend)
    history.load()
    return history


@pytest.fixture
def other_store(shared_data):
    """A second process's store over the same medium."""
    return ClipboardHistoryStore(MemoryStore(data=shared_data))


@pytest.fixture
def pasteboard():
    return MemoryPasteboard()
