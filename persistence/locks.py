from __future__ import annotations

import threading
from pathlib import Path

_registry_guard = threading.Lock()
_file_locks: dict[Path, threading.Lock] = {}


def lock_for_file(path: Path) -> threading.Lock:
    """
    Process-wide mutex for a backing file; every store on the same file shares it.
    """
    key = path.resolve()
    with _registry_guard:
        return _file_locks.setdefault(key, threading.Lock())
