from __future__ import annotations

from .errors import (
    DecodeError,
    EncodeError,
    NoteNotFoundError,
    NotesFileNotFoundError,
    NoteStoreError,
    NotFoundError,
    StoreIOError,
)
from .note_store import Note, NoteStore
from .repositories import AsyncDiskNoteRepository, AsyncNoteRepository

__all__ = [
    "Note",
    "NoteStore",
    "AsyncNoteRepository",
    "AsyncDiskNoteRepository",
    "NoteStoreError",
    "NotFoundError",
    "NotesFileNotFoundError",
    "NoteNotFoundError",
    "StoreIOError",
    "DecodeError",
    "EncodeError",
]
