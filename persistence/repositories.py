from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from .note_store import Note, NoteStore


class AsyncNoteRepository(Protocol):
    async def put(self, note: Note) -> Note: ...
    async def get(self, note_id: str) -> Note: ...


class AsyncDiskNoteRepository(AsyncNoteRepository):
    """
    Async wrapper around the disk-backed note store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, path: Path) -> None:
        self._store = NoteStore(path)

    @property
    def store(self) -> NoteStore:
        return self._store

    async def put(self, note: Note) -> Note:
        return await asyncio.to_thread(self._store.put, note)

    async def get(self, note_id: str) -> Note:
        return await asyncio.to_thread(self._store.get, note_id)
