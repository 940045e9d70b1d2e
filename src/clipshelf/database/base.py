from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

DEFAULT_NAMESPACE = "group.lcl.clipboard"


class StorageError(Exception):
    """Raised by a backend when the shared medium cannot be read or written."""


class KeyValueStore(ABC):
    """A namespaced key-value region shared by every process using the same namespace.

    Values are either strings or ordered lists of strings. Every call goes
    straight to the medium; nothing is cached between calls.
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE):
        if not namespace:
            raise ValueError("namespace must not be empty")
        self.namespace = namespace

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def get_list(self, key: str) -> Optional[List[str]]:
        pass

    @abstractmethod
    def set_list(self, key: str, values: Sequence[str]) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        pass

    def health_check(self) -> Dict[str, Any]:
        return {"status": "healthy", "backend": type(self).__name__, "namespace": self.namespace}

    def close(self) -> None:
        pass

    def __enter__(self) -> "KeyValueStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
