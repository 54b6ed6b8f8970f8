from __future__ import annotations

from pathlib import Path

# Relative to the process working directory.
NOTES_FILE = Path("note") / "db" / "notes.json"


def notes_file(relative: Path = NOTES_FILE) -> Path:
    return Path.cwd() / relative
