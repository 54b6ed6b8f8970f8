from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Run from a temp working directory so tests never touch a real ./note/db.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def notes_path(sandbox_project: Path) -> Path:
    """
    Seed an empty notes document; writes refuse to create the file themselves.
    """
    path = sandbox_project / "note" / "db" / "notes.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{}\n", encoding="utf-8")
    return path


@pytest.fixture
def client(sandbox_project: Path):
    from fastapi.testclient import TestClient

    import app as app_module

    return TestClient(app_module.create_app())
