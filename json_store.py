from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """
    Read and parse a JSON document from disk.

    Raises FileNotFoundError for missing files, OSError for other read
    failures and json.JSONDecodeError for malformed content.
    """
    raw = path.read_text(encoding="utf-8")
    return json.loads(raw)


def dump_json(payload: Any, *, indent: int = 2, sort_keys: bool = True) -> str:
    return json.dumps(payload, indent=indent, sort_keys=sort_keys) + "\n"


def replace_json(path: Path, payload: Any, *, indent: int = 2, sort_keys: bool = True) -> None:
    """
    Replace an existing JSON file atomically: write to a temp file, then rename.

    The target must already exist; this never creates a new document.
    """
    text = dump_json(payload, indent=indent, sort_keys=sort_keys)
    if not path.exists():
        raise FileNotFoundError(str(path))
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            f.write(text)
        tmp_path.replace(path)
    finally:
        tmp_path.unlink(missing_ok=True)
