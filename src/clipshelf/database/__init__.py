from .base import DEFAULT_NAMESPACE, KeyValueStore, StorageError
from .file_store import FileStore
from .memory_store import MemoryStore
from .redis_store import RedisStore

__all__ = [
    'DEFAULT_NAMESPACE',
    'FileStore',
    'KeyValueStore',
    'MemoryStore',
    'RedisStore',
    'StorageError',
]
