from typing import Dict, List, Optional, Sequence, Union

from .base import DEFAULT_NAMESPACE, KeyValueStore, StorageError

_Value = Union[str, List[str]]


class MemoryStore(KeyValueStore):
    """Process-local medium. Several stores handed the same ``data`` dict share it."""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, data: Optional[Dict[str, _Value]] = None):
        super().__init__(namespace)
        self.data: Dict[str, _Value] = data if data is not None else {}

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def get(self, key: str) -> Optional[str]:
        value = self.data.get(self._key(key))
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"{key!r} does not hold a string")
        return value

    def set(self, key: str, value: str) -> None:
        self.data[self._key(key)] = value

    def get_list(self, key: str) -> Optional[List[str]]:
        value = self.data.get(self._key(key))
        if value is None:
            return None
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise StorageError(f"{key!r} does not hold a list of strings")
        return list(value)

    def set_list(self, key: str, values: Sequence[str]) -> None:
        self.data[self._key(key)] = list(values)

    def delete(self, key: str) -> bool:
        return self.data.pop(self._key(key), None) is not None
