from __future__ import annotations

import re
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol

from pocket_notes.errors import StoreReadError, StoreWriteError
from pocket_notes.infrastructure.filesystem import atomic_write_text
from pocket_notes.logging_setup import get_logger

log = get_logger("storage")

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class StoreAdapter(Protocol):
    """
    Key-value store for serialized blobs.

    get() returns None for a missing key and raises StoreReadError on I/O
    problems; set() raises StoreWriteError.
    """

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


def _check_key(key: str) -> str:
    if not _KEY_RE.match(key or "") or key.startswith("."):
        raise ValueError(f"Invalid store key: {key!r}")
    return key


@dataclass(frozen=True)
class JsonFileStore:
    """One UTF-8 file per key: <data_dir>/<key>.json."""
    data_dir: Path

    def ensure(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{_check_key(key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StoreReadError(key, str(e)) from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            atomic_write_text(path, value)
        except OSError as e:
            raise StoreWriteError(key, str(e)) from e
        log.debug("Stored key=%s bytes=%d path=%s", key, len(value), path)


@dataclass
class MemoryStore:
    """Process-local store: tests, and fallback when the data dir is unusable."""
    data: dict[str, str] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self.data[key] = value


def open_default_store(data_dir: Path) -> StoreAdapter:
    store = JsonFileStore(Path(data_dir))
    try:
        store.ensure()
    except OSError:
        log.exception("Data dir unusable, notes will live in memory only: %s", data_dir)
        return MemoryStore()
    log.info("Using data dir: %s", data_dir)
    return store
