from __future__ import annotations

from types import SimpleNamespace

import pytest

from class_attendance.main import create_app


@pytest.fixture()
def client(tmp_path):
    settings = SimpleNamespace(
        REMOTE_ENDPOINT_URL="",
        LOCAL_CACHE_PATH=str(tmp_path / "cache.json"),
        SERVER_DOCUMENT_PATH=str(tmp_path / "server.json"),
        DOCUMENT_ROUTE="/api/document",
        SYNC_DEBOUNCE_SECONDS=0.0,
        DEBUG=False,
        TESTING=True,
        LOG_LEVEL="WARNING",
    )
    app = create_app(settings)
    return app.test_client()


def test_get_returns_default_document_when_nothing_stored(client):
    res = client.get("/api/document")

    body = res.get_json()
    assert res.status_code == 200
    assert [c["id"] for c in body["classes"]] == ["logos", "smart", "moriah", "horeb", "sabiduria"]
    assert body["attendance"] == {}
    assert body["version"] == 1


def test_post_stores_document_and_assigns_updated_at(client):
    doc = client.get("/api/document").get_json()
    doc["updatedAt"] = "2000-01-01T00:00:00.000Z"
    doc["classes"][0]["teacherName"] = "Sofía"

    res = client.post("/api/document", json=doc)

    ack = res.get_json()
    assert res.status_code == 200
    assert ack["ok"] is True
    assert ack["updatedAt"] > "2000-01-01T00:00:00.000Z"

    stored = client.get("/api/document").get_json()
    assert stored["classes"][0]["teacherName"] == "Sofía"
    assert stored["updatedAt"] == ack["updatedAt"]


@pytest.mark.parametrize("payload", [b"not json", b"[1, 2]"])
def test_post_rejects_non_object(client, payload):
    res = client.post("/api/document", data=payload, content_type="application/json")

    assert res.status_code == 400
    assert res.get_json()["ok"] is False
