"""
Notes API — In-Memory Note Store
==================================

What:  Process-local, ordered collection of notes plus the next-id counter.
How:   A plain list (insertion order) guarded by an RLock. Ids are the
       decimal string of a counter that only ever increases, so an id is
       never handed out twice, even after the note it named is deleted.
Who:   Owned by the application instance (app.state.store) and reached by
       NoteService through the FastAPI dependency in routes/notes.py.

Lifecycle:
    Created empty with the app. Nothing is persisted; a restart loses
    everything. `reset()` exists for tests that reuse one store.
"""

import logging
import threading
from dataclasses import replace
from typing import List, Optional

from notes_api.exceptions import NotFoundError
from notes_api.models.note import Note, utc_now_iso

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Ordered in-memory note collection.

    Thread Safety:
        Every read-modify-write runs under one lock, so a single call is
        atomic. Sequences of calls (e.g. get then update) are not.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._notes: List[Note] = []
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def list(self) -> List[Note]:
        """Snapshot of all notes in insertion order."""
        with self._lock:
            return list(self._notes)

    def find(self, note_id: str) -> Optional[Note]:
        """Exact string match on id; None when absent."""
        with self._lock:
            for note in self._notes:
                if note.id == note_id:
                    return note
            return None

    def get(self, note_id: str) -> Note:
        note = self.find(note_id)
        if note is None:
            raise NotFoundError(note_id=note_id)
        return note

    def create(self, title: str, content: str) -> Note:
        """Allocate the next id, stamp both timestamps and append."""
        with self._lock:
            now = utc_now_iso()
            note = Note(
                id=str(self._next_id),
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._notes.append(note)
            return note

    def update(self, note_id: str, title: str, content: str) -> Note:
        """
        Replace title and content of an existing note at its current position.

        `id` and `created_at` are carried over; `updated_at` is re-stamped.

        Raises:
            NotFoundError: no note has this id
        """
        with self._lock:
            for index, note in enumerate(self._notes):
                if note.id == note_id:
                    updated = replace(
                        note,
                        title=title,
                        content=content,
                        updated_at=utc_now_iso(),
                    )
                    self._notes[index] = updated
                    return updated
            raise NotFoundError(note_id=note_id)

    def delete(self, note_id: str) -> None:
        """
        Remove the note with this id.

        Raises:
            NotFoundError: the collection did not shrink
        """
        with self._lock:
            before = len(self._notes)
            self._notes = [n for n in self._notes if n.id != note_id]
            if len(self._notes) == before:
                raise NotFoundError(note_id=note_id)

    def reset(self) -> None:
        """Drop every note and restart ids at "1"."""
        with self._lock:
            self._notes = []
            self._next_id = 1
        logger.debug("Note store reset")
