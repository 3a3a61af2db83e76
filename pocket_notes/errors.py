from __future__ import annotations


class PocketNotesError(Exception):
    """Base class for every error raised inside pocket_notes."""


class StoreError(PocketNotesError):
    def __init__(self, key: str, message: str = ""):
        super().__init__(f"{message or type(self).__name__} (key={key!r})")
        self.key = key


class StoreReadError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


class NoteDecodeError(PocketNotesError, ValueError):
    """Persisted blob is not a JSON array of {id, text} objects."""


class LoadFailure(PocketNotesError):
    """
    Startup read/decode failed. Recorded by the controller, never raised:
    the collection just starts empty.
    """
    def __init__(self, cause: BaseException):
        super().__init__(f"Failed to load notes: {cause}")
        self.cause = cause


class PersistFailure(PocketNotesError):
    """
    Write after a mutation failed. Recorded by the controller, never raised:
    in-memory state stays authoritative until the next successful write.
    """
    def __init__(self, cause: BaseException):
        super().__init__(f"Failed to save notes: {cause}")
        self.cause = cause
