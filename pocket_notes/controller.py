from __future__ import annotations

from typing import Callable, Optional

from pocket_notes.core.codec import dumps_notes, loads_notes
from pocket_notes.core.models import Note, new_note_id
from pocket_notes.errors import (
    LoadFailure,
    NoteDecodeError,
    PersistFailure,
    PocketNotesError,
    StoreError,
)
from pocket_notes.logging_setup import get_logger
from pocket_notes.settings import NOTES_KEY
from pocket_notes.storage.store import StoreAdapter

log = get_logger("controller")

EMPTY_NOTE_TITLE = "Warning"
EMPTY_NOTE_MESSAGE = "Note cannot be empty"

ChangeListener = Callable[[tuple[Note, ...]], None]
WarningListener = Callable[[str, str], None]
Submit = Callable[[Callable[[], None]], None]


def _run_now(job: Callable[[], None]) -> None:
    job()


class NoteListController:
    """
    Owns the in-memory note collection and keeps the stored copy in sync.

    Every add/delete replaces the collection and writes the whole snapshot
    under a single key (write-through). Storage errors are logged and kept
    in ``last_failure``; they never propagate to the caller.

    ``submit`` decides where the write runs. By default it runs inline; the
    Qt window passes a submitter backed by a one-thread pool.
    """

    def __init__(
        self,
        store: StoreAdapter,
        *,
        key: str = NOTES_KEY,
        clock: Optional[Callable[[], int]] = None,
        submit: Optional[Submit] = None,
    ):
        self._store = store
        self._key = key
        self._clock = clock
        self._submit = submit or _run_now
        self._notes: tuple[Note, ...] = ()
        self._change_listeners: list[ChangeListener] = []
        self._warning_listeners: list[WarningListener] = []
        self.last_failure: Optional[PocketNotesError] = None

    # ---- state ----

    @property
    def notes(self) -> tuple[Note, ...]:
        return self._notes

    def __len__(self) -> int:
        return len(self._notes)

    # ---- listeners ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        self._change_listeners.append(listener)
        return lambda: self._change_listeners.remove(listener)

    def on_warning(self, listener: WarningListener) -> Callable[[], None]:
        self._warning_listeners.append(listener)
        return lambda: self._warning_listeners.remove(listener)

    def _notify(self) -> None:
        snapshot = self._notes
        for cb in list(self._change_listeners):
            cb(snapshot)

    def _warn(self, title: str, message: str) -> None:
        log.warning("%s: %s", title, message)
        for cb in list(self._warning_listeners):
            cb(title, message)

    # ---- operations ----

    def initialize(self) -> None:
        notes: list[Note] = []
        try:
            blob = self._store.get(self._key)
            if blob:
                notes = loads_notes(blob)
        except (StoreError, NoteDecodeError) as e:
            self.last_failure = LoadFailure(e)
            log.exception("Failed to load notes, starting empty: key=%s", self._key)
            notes = []

        self._notes = tuple(notes)
        log.info("Notes loaded: count=%d", len(self._notes))
        self._notify()

    def add(self, text: str) -> Optional[Note]:
        if (text or "").strip() == "":
            self._warn(EMPTY_NOTE_TITLE, EMPTY_NOTE_MESSAGE)
            return None

        existing = {n.id for n in self._notes}
        note = Note(id=new_note_id(existing, clock=self._clock), text=text)
        self._replace(self._notes + (note,))
        log.info("Note added: id=%s len=%d", note.id, len(text))
        return note

    def delete(self, note_id: str) -> bool:
        remaining = tuple(n for n in self._notes if n.id != note_id)
        removed = len(remaining) != len(self._notes)
        if removed:
            log.info("Note deleted: id=%s", note_id)
        else:
            log.debug("Delete ignored, no such note: id=%s", note_id)
        self._replace(remaining)
        return removed

    def persist(self, notes: tuple[Note, ...]) -> bool:
        try:
            self._store.set(self._key, dumps_notes(notes))
        except StoreError as e:
            self.last_failure = PersistFailure(e)
            log.exception("Failed to save notes: key=%s count=%d", self._key, len(notes))
            return False
        log.debug("Notes saved: count=%d", len(notes))
        return True

    def _replace(self, notes: tuple[Note, ...]) -> None:
        self._notes = notes
        # write is queued first: a failing listener must not skip it
        self._submit(lambda: self.persist(notes))
        self._notify()
