from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from persistence.paths import NOTES_FILE


@dataclass(frozen=True)
class Settings:
    # Persistence (fixed, relative to the working directory)
    notes_file: Path = NOTES_FILE


def get_settings() -> Settings:
    return Settings()
