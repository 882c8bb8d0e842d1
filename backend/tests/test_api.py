"""Smoke tests for the HTTP surface."""

from __future__ import annotations

import base64

import pytest
from fastapi.testclient import TestClient

from article_renderer.main import app

DOCUMENT = {
    "time": 1712345678901,
    "version": "2.28.2",
    "blocks": [
        {"type": "header", "data": {"text": "Hello", "level": 2}},
        {"type": "table", "data": {"content": [["a", "b"], ["c", "d"]], "withHeadings": False}},
        {"type": "poll", "data": {"question": "?"}},
    ],
}


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    res = client.get("/api/health")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["app"]


def test_render_document(client: TestClient) -> None:
    res = client.post("/api/render", json={"document": DOCUMENT})

    assert res.status_code == 200
    body = res.json()
    assert body["block_count"] == 3
    assert body["rendered_count"] == 2
    assert body["unknown_types"] == ["poll"]
    assert body["tree"][0] == {"tag": "h2", "props": {"className": "text-4xl font-bold my-5"}, "html": "Hello"}
    assert body["html"].startswith("<h2")
    assert "<thead" not in body["html"]


def test_render_article_record(client: TestClient) -> None:
    res = client.post("/api/render", json={"document": {"title": "Post", "content": [DOCUMENT]}})

    assert res.status_code == 200
    assert res.json()["block_count"] == 3


def test_render_empty_request(client: TestClient) -> None:
    res = client.post("/api/render", json={})

    assert res.status_code == 200
    assert res.json() == {"html": "", "tree": [], "block_count": 0, "rendered_count": 0, "unknown_types": []}


def test_render_rejects_non_json_body(client: TestClient) -> None:
    res = client.post("/api/render", content=b"not json", headers={"Content-Type": "application/json"})

    assert res.status_code == 422


def test_export_docx(client: TestClient) -> None:
    res = client.post("/api/render/docx", json={"document": DOCUMENT, "title": "Hello world"})

    assert res.status_code == 200
    body = res.json()
    assert body["file_name"] == "Hello_world.docx"
    assert base64.b64decode(body["file_base64"]).startswith(b"PK")


def test_export_without_content(client: TestClient) -> None:
    res = client.post("/api/render/docx", json={"document": [{"type": "poll", "data": {}}]})

    assert res.status_code == 404
    assert "no blocks" in res.json()["detail"]


def test_export_docx_with_control_characters(client: TestClient) -> None:
    document = [
        {"type": "paragraph", "data": {"text": "line one\u000bline two"}},
        {"type": "paragraph", "data": {"text": "plain\u0000text"}},
    ]
    res = client.post("/api/render/docx", json={"document": document})

    assert res.status_code == 200
    assert res.json()["file_name"] == "article.docx"
