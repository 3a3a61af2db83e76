from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Container


@dataclass(frozen=True)
class Note:
    id: str
    text: str


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def new_note_id(existing: Container[str] = (), *, clock: Callable[[], int] | None = None) -> str:
    """
    Id = Unix time in milliseconds, as a string.
    Two notes created within the same millisecond get consecutive values.
    """
    value = int((clock or _now_ms)())
    while str(value) in existing:
        value += 1
    return str(value)
