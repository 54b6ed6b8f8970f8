from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient


def test_app_smoke_routes(notes_path):
    import app as app_module

    app = app_module.create_app()
    client = TestClient(app)

    paths = app.openapi()["paths"]
    assert "post" in paths["/note"]
    assert "get" in paths["/note/{id}"]

    repo = app.state.note_repository
    assert repo.store.path.resolve() == notes_path.resolve()

    r = client.post("/note", json={"id": "s1", "text": "smoke", "cover_url": ""})
    assert r.status_code == 200
    r = client.get("/note/s1")
    assert r.status_code == 200
    assert r.json()["text"] == "smoke"

    r = client.options(
        "/note",
        headers={"Origin": "https://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_settings_use_fixed_notes_path():
    from settings import Settings, get_settings

    assert get_settings() == Settings()
    assert get_settings().notes_file == Path("note/db/notes.json")
