from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from persistence.errors import NoteStoreError
from persistence.note_store import Note
from persistence.repositories import AsyncNoteRepository

router = APIRouter(tags=["notes"])
logger = logging.getLogger(__name__)


def get_note_repository(request: Request) -> AsyncNoteRepository:
    return request.app.state.note_repository


def _to_http_error(e: NoteStoreError) -> HTTPException:
    if e.status_code >= 500:
        logger.warning("NOTE STORE: %s: %s", type(e).__name__, e)
    return HTTPException(status_code=e.status_code, detail=str(e))


@router.post("/note")
async def save_note(note: Note, repo: AsyncNoteRepository = Depends(get_note_repository)) -> Note:
    try:
        return await repo.put(note)
    except NoteStoreError as e:
        raise _to_http_error(e) from e


@router.get("/note/{id}")
async def get_note(id: str, repo: AsyncNoteRepository = Depends(get_note_repository)) -> Note:
    try:
        return await repo.get(id)
    except NoteStoreError as e:
        raise _to_http_error(e) from e
