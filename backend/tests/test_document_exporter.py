"""Tests for exporting documents to DOCX."""

from __future__ import annotations

import logging
from io import BytesIO

import pytest
from docx import Document as load_docx

from article_renderer import document_exporter
from article_renderer.block_renderers import BLOCK_FAILURE_PLACEHOLDER
from article_renderer.document_decoder import decode_document
from article_renderer.document_exporter import DocumentExportError, export_document_to_docx, markup_to_text
from article_renderer.document_models import CodeBlock

ARTICLE = [
    {"type": "header", "data": {"text": "Getting <i>started</i>", "level": 2}},
    {"type": "paragraph", "data": {"text": "Install &amp; run<br>twice"}},
    {"type": "list", "data": {"style": "ordered", "items": ["first", {"content": "second", "items": ["nested"]}]}},
    {"type": "checklist", "data": {"items": [{"checked": True, "text": "tested"}]}},
    {"type": "quote", "data": {"text": "Keep it simple", "caption": "Someone"}},
    {"type": "code", "data": {"code": "pip install ."}},
    {"type": "table", "data": {"content": "Name | Qty\nChair | 10"}},
    {"type": "embed", "data": {}},
]


def _reopen(payload: bytes):
    return load_docx(BytesIO(payload))


def test_markup_to_text() -> None:
    assert markup_to_text("a<br>b &amp; <i>c</i>") == "a\nb & c"


def test_export_contains_document_content() -> None:
    file_name, payload = export_document_to_docx(decode_document(ARTICLE), title="My Article")

    assert file_name == "My_Article.docx"
    docx = _reopen(payload)
    texts = [paragraph.text for paragraph in docx.paragraphs]

    assert texts[0] == "My Article"
    assert "Getting started" in texts
    assert "Install & run\ntwice" in texts
    assert ["first", "second", "nested"] == [
        paragraph.text for paragraph in docx.paragraphs if paragraph.style.name.startswith("List Number")
    ]
    assert "☑ tested" in texts
    assert "— Someone" in texts
    assert "pip install ." in texts

    table = docx.tables[0]
    assert table.cell(0, 0).text == "Name"
    assert table.cell(1, 1).text == "10"
    assert table.cell(0, 0).paragraphs[0].runs[0].bold is True


def test_heading_levels_use_word_heading_styles() -> None:
    _, payload = export_document_to_docx(decode_document(ARTICLE[:1]))

    paragraph = _reopen(payload).paragraphs[0]
    assert paragraph.style.name == "Heading 2"


def test_default_file_name() -> None:
    file_name, _ = export_document_to_docx(decode_document(ARTICLE[:1]))

    assert file_name == "article.docx"


@pytest.mark.parametrize("payload", [None, [], [{"type": "embed", "data": {}}]])
def test_nothing_to_export_raises(payload: object) -> None:
    with pytest.raises(DocumentExportError):
        export_document_to_docx(decode_document(payload))


def test_control_characters_do_not_break_export() -> None:
    document = decode_document(
        [
            {"type": "paragraph", "data": {"text": "line one\u000bline two"}},
            {"type": "code", "data": {"code": "nul\x00byte"}},
            {"type": "quote", "data": {"text": "quoted\x07", "caption": "bell\x07"}},
            {"type": "paragraph", "data": {"text": "still here"}},
        ]
    )

    _, payload = export_document_to_docx(document)
    texts = [paragraph.text for paragraph in _reopen(payload).paragraphs]

    assert texts == ["line one\nline two", "nulbyte", "quoted", "— bell", "still here"]


def test_failing_block_is_replaced_by_placeholder(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    original = document_exporter._append_block

    def fail_on_code(document, block):
        if isinstance(block, CodeBlock):
            raise ValueError("boom")
        return original(document, block)

    monkeypatch.setattr(document_exporter, "_append_block", fail_on_code)
    with caplog.at_level(logging.ERROR, logger="article_renderer.document_exporter"):
        _, payload = export_document_to_docx(decode_document(ARTICLE))

    texts = [paragraph.text for paragraph in _reopen(payload).paragraphs]
    assert BLOCK_FAILURE_PLACEHOLDER in texts
    assert "pip install ." not in texts
    assert "Getting started" in texts
    assert len(caplog.records) == 1
    assert "code" in caplog.records[0].getMessage()
