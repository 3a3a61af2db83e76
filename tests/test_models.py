import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import dataclasses

import pytest

from pocket_notes.core.models import Note, new_note_id


def test_id_from_clock():
    assert new_note_id(clock=lambda: 1700000000123) == "1700000000123"


def test_id_collision_bumps():
    existing = {"1000", "1001"}
    assert new_note_id(existing, clock=lambda: 1000) == "1002"


def test_default_clock_is_millis():
    note_id = new_note_id()
    assert note_id.isdigit()
    assert len(note_id) >= 13


def test_note_is_immutable():
    note = Note("1", "a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        note.text = "b"
