from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
from urllib.parse import unquote, urlparse

from dotenv import find_dotenv, load_dotenv

from clipshelf.database import DEFAULT_NAMESPACE, FileStore, KeyValueStore, MemoryStore, RedisStore

BACKENDS = ("redis", "file", "memory")
_URI_TLS = {"redis": False, "rediss": True}


def _load_env_file(env_path: Optional[Path] = None) -> None:
    if env_path is not None:
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=False)


def _to_bool(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class StoreConfig:
    backend: str = "redis"
    namespace: str = DEFAULT_NAMESPACE
    data_dir: Path = Path.home() / ".clipshelf"
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    ssl: bool = False
    poll_interval: float = 0.5

    def __post_init__(self) -> None:
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend {self.backend!r}; expected one of {', '.join(BACKENDS)}")

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "StoreConfig":
        _load_env_file(env_path)

        data_dir_raw = os.getenv("CLIPSHELF_DATA_DIR")
        poll_raw = os.getenv("CLIPSHELF_POLL_INTERVAL")
        common = {
            "backend": os.getenv("CLIPSHELF_BACKEND", cls.backend).strip().lower(),
            "namespace": os.getenv("CLIPSHELF_NAMESPACE") or cls.namespace,
            "data_dir": Path(data_dir_raw).expanduser() if data_dir_raw else cls.data_dir,
            "poll_interval": float(poll_raw) if poll_raw else cls.poll_interval,
        }

        uri = os.getenv("REDIS_URI")
        if uri:
            return cls.from_uri(uri, **common)

        port_raw = os.getenv("REDIS_PORT")
        db_raw = os.getenv("REDIS_DB")
        return cls(
            host=os.getenv("REDIS_HOST", cls.host),
            port=int(port_raw) if port_raw else cls.port,
            db=int(db_raw) if db_raw else cls.db,
            password=os.getenv("REDIS_PASSWORD") or None,
            ssl=_to_bool(os.getenv("REDIS_SSL")),
            **common,
        )

    @classmethod
    def from_uri(cls, uri: str, **fields: Any) -> "StoreConfig":
        """Redis settings from ``redis://[:password@]host[:port][/db]``.

        ``rediss://`` selects TLS. Other settings pass through ``fields``.
        """
        parsed = urlparse(uri)
        if parsed.scheme not in _URI_TLS:
            raise ValueError(f"Unsupported Redis URI scheme: {parsed.scheme!r}")

        try:
            port = parsed.port or cls.port
            db = int(parsed.path.strip("/") or cls.db)
        except ValueError as e:
            raise ValueError(f"Malformed Redis URI {uri!r}: {e}") from e

        return cls(
            host=parsed.hostname or cls.host,
            port=port,
            db=db,
            password=unquote(parsed.password) if parsed.password else None,
            ssl=_URI_TLS[parsed.scheme],
            **fields,
        )

    def create_backend(self) -> KeyValueStore:
        if self.backend == "file":
            return FileStore(namespace=self.namespace, base_dir=self.data_dir)
        if self.backend == "memory":
            return MemoryStore(namespace=self.namespace)
        return RedisStore(
            namespace=self.namespace,
            host=self.host,
            port=self.port,
            db=self.db,
            password=self.password,
            ssl=self.ssl,
        )
