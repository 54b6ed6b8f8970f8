from __future__ import annotations


class NoteStoreError(Exception):
    """Base class for failures surfaced by the note store."""

    status_code: int = 500


class NotFoundError(NoteStoreError):
    pass


class NotesFileNotFoundError(NotFoundError):
    def __init__(self, path: object):
        super().__init__(f"file {path} not found")
        self.path = path


class NoteNotFoundError(NotFoundError):
    status_code = 404

    def __init__(self, note_id: str):
        super().__init__("Note not found")
        self.note_id = note_id


class StoreIOError(NoteStoreError):
    pass


class DecodeError(NoteStoreError):
    pass


class EncodeError(NoteStoreError):
    pass
