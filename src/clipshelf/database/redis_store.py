import logging
from typing import Any, Dict, List, Optional, Sequence

import redis

from .base import DEFAULT_NAMESPACE, KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class RedisStore(KeyValueStore):
    """Shared medium backed by a Redis database.

    Keys live under ``<namespace>:<key>``. Strings are plain Redis strings,
    string lists are native Redis lists.
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, host: str = 'localhost', port: int = 6379,
                 db: int = 0, password: Optional[str] = None, ssl: bool = False,
                 client: Optional[redis.Redis] = None):
        super().__init__(namespace)
        self.client = client or redis.Redis(
            host=host,
            port=port,
            db=db,
            password=password,
            ssl=ssl,
            decode_responses=True
        )

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(self._key(key))
        except (redis.RedisError, UnicodeDecodeError) as e:
            raise StorageError(f"Redis read of {key!r} failed: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(self._key(key), value)
        except redis.RedisError as e:
            raise StorageError(f"Redis write of {key!r} failed: {e}") from e

    def get_list(self, key: str) -> Optional[List[str]]:
        full_key = self._key(key)
        try:
            if not self.client.exists(full_key):
                return None
            return self.client.lrange(full_key, 0, -1)
        except (redis.RedisError, UnicodeDecodeError) as e:
            raise StorageError(f"Redis read of {key!r} failed: {e}") from e

    def set_list(self, key: str, values: Sequence[str]) -> None:
        full_key = self._key(key)
        try:
            pipe = self.client.pipeline(transaction=True)
            pipe.delete(full_key)
            if values:
                pipe.rpush(full_key, *values)
            pipe.execute()
        except redis.RedisError as e:
            raise StorageError(f"Redis write of {key!r} failed: {e}") from e

    def delete(self, key: str) -> bool:
        try:
            return bool(self.client.delete(self._key(key)))
        except redis.RedisError as e:
            raise StorageError(f"Redis delete of {key!r} failed: {e}") from e

    def health_check(self) -> Dict[str, Any]:
        try:
            self.client.ping()
            info = self.client.info()
        except redis.RedisError as e:
            logger.error(f"Redis health check failed: {e}")
            return {"status": "unreachable", "backend": "redis", "namespace": self.namespace, "error": str(e)}

        return {
            "status": "healthy",
            "backend": "redis",
            "namespace": self.namespace,
            "connected_clients": info.get('connected_clients', 0),
            "used_memory": info.get('used_memory_human', 'unknown'),
            "total_keys": self.client.dbsize(),
        }

    def close(self):
        self.client.close()
