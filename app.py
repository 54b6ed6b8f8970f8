from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    from endpoints.note_endpoints import router as note_router
    from persistence.paths import notes_file
    from persistence.repositories import AsyncDiskNoteRepository

    if settings is None:
        settings = get_settings()

    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One store per process, resolved against the current working directory.
    path: Path = notes_file(settings.notes_file)
    app.state.note_repository = AsyncDiskNoteRepository(path)
    logger.info("Notes file: %s", path)

    app.include_router(note_router)

    return app


app = create_app()
