import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .base import DEFAULT_NAMESPACE, KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class FileStore(KeyValueStore):
    """Shared medium kept as one JSON document per namespace.

    Every call re-reads the document, and every write replaces it whole, so
    two processes pointed at the same directory see each other's saves.
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, base_dir: Optional[Path] = None):
        super().__init__(namespace)
        if base_dir is None:
            base_dir = Path.home() / ".clipshelf"
        self.base_dir = Path(base_dir)
        self.path = self.base_dir / f"{namespace}.json"

    def _read(self) -> Dict[str, Any]:
        try:
            if not self.path.exists() or self.path.stat().st_size == 0:
                return {}
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.namespace}-", suffix=".tmp", dir=self.base_dir)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise StorageError(f"{key!r} does not hold a string")
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def get_list(self, key: str) -> Optional[List[str]]:
        value = self._read().get(key)
        if value is None:
            return None
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise StorageError(f"{key!r} does not hold a list of strings")
        return value

    def set_list(self, key: str, values: Sequence[str]) -> None:
        data = self._read()
        data[key] = list(values)
        self._write(data)

    def delete(self, key: str) -> bool:
        data = self._read()
        if key not in data:
            return False
        del data[key]
        self._write(data)
        return True

    def health_check(self) -> Dict[str, Any]:
        writable_dir = self.base_dir if self.base_dir.exists() else self.base_dir.parent
        return {
            "status": "healthy" if os.access(writable_dir, os.W_OK) else "read-only",
            "backend": "file",
            "namespace": self.namespace,
            "path": str(self.path),
        }
