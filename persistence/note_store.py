from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, RootModel, ValidationError

from json_store import read_json, replace_json

from .errors import (
    DecodeError,
    EncodeError,
    NoteNotFoundError,
    NotesFileNotFoundError,
    NoteStoreError,
    StoreIOError,
)
from .locks import lock_for_file

logger = logging.getLogger(__name__)


class Note(BaseModel):
    id: str
    text: str
    cover_url: str


class NotesDoc(RootModel[dict[str, Note]]):
    """
    Mirrors the on-disk notes.json schema:
      { "<id>": { "id": "<id>", "text": "...", "cover_url": "..." } }
    """

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "NotesDoc":
        return cls.model_validate(doc)

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class NoteStore:
    """
    In-memory notes keyed by id, persisted as one JSON document.

    Every operation holds the lock for its whole duration. Reads reload the
    file first, so disk is the only source of truth for `get`.
    """

    def __init__(self, path: Path):
        self._path = path
        self._lock = lock_for_file(path)
        self._notes: dict[str, Note] = {}

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        logger.info("Loading notes from file")
        try:
            raw = read_json(self._path)
        except FileNotFoundError as e:
            raise NotesFileNotFoundError(self._path) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"malformed notes file {self._path}: {e}") from e
        except OSError as e:
            raise StoreIOError(f"failed to read {self._path}: {e}") from e

        try:
            doc = NotesDoc.from_disk_doc(raw)
        except ValidationError as e:
            raise DecodeError(f"invalid notes in {self._path}: {e}") from e
        self._notes = dict(doc.root)

    def save(self) -> None:
        try:
            payload = NotesDoc(self._notes).to_disk_doc()
            replace_json(self._path, payload)
        except FileNotFoundError as e:
            raise NotesFileNotFoundError(self._path) from e
        except (TypeError, ValueError) as e:
            raise EncodeError(f"failed to encode notes: {e}") from e
        except OSError as e:
            raise StoreIOError(f"failed to write {self._path}: {e}") from e

    def put(self, note: Note) -> Note:
        with self._lock:
            self._notes[note.id] = note
            self.save()
            return note

    def get(self, note_id: str) -> Note:
        logger.debug("Fetching note id=%s", note_id)
        with self._lock:
            try:
                self.load()
            except NoteStoreError as e:
                logger.error("Failed to load notes: %r", e)
                raise
            note = self._notes.get(note_id)
            if note is None:
                raise NoteNotFoundError(note_id)
            return note
