# pocket_notes/infrastructure/filesystem.py

from __future__ import annotations

import os
import uuid
from pathlib import Path


def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    A reader never sees a half-written blob.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    f = None
    try:
        f = open(tmp_path, "w", encoding=encoding, newline="")
        f.write(text)
        f.flush()
        os.fsync(f.fileno())
        f.close()
        f = None

        tmp_path.replace(path)

    finally:
        try:
            if f is not None:
                f.close()
        except OSError:
            pass

        try:
            if tmp_path.exists():
                tmp_path.unlink()
        except OSError:
            pass
