from .models import Note, new_note_id
from .codec import dumps_notes, loads_notes

__all__ = ["Note",
           "new_note_id",
           "dumps_notes",
           "loads_notes"
           ]
