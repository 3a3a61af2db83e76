from __future__ import annotations

import json
from typing import Iterable

from pocket_notes.errors import NoteDecodeError
from pocket_notes.core.models import Note
from pocket_notes.logging_setup import get_logger

log = get_logger("codec")


def dumps_notes(notes: Iterable[Note]) -> str:
    return json.dumps(
        [{"id": n.id, "text": n.text} for n in notes],
        ensure_ascii=False,
    )


def loads_notes(blob: str) -> list[Note]:
    """
    Parse a blob produced by dumps_notes().

    Raises NoteDecodeError on anything that is not a list of
    {"id": str, "text": str}. Repeated ids keep the first occurrence,
    records with blank text are dropped.
    """
    try:
        data = json.loads(blob)
    except (TypeError, json.JSONDecodeError) as e:
        raise NoteDecodeError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise NoteDecodeError(f"Expected a JSON array, got {type(data).__name__}")

    notes: list[Note] = []
    seen: set[str] = set()
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise NoteDecodeError(f"Item {i} is not an object")
        note_id = item.get("id")
        text = item.get("text")
        if not isinstance(note_id, str) or not isinstance(text, str):
            raise NoteDecodeError(f"Item {i} must have string 'id' and 'text'")
        if not text.strip():
            log.warning("Note with empty text dropped on load: %s", note_id)
            continue
        if note_id in seen:
            log.warning("Duplicate note id dropped on load: %s", note_id)
            continue
        seen.add(note_id)
        notes.append(Note(id=note_id, text=text))
    return notes
