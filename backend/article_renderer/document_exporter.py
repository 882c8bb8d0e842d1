"""Export decoded documents into standalone DOCX files."""
from __future__ import annotations

import html
import logging
import re
from io import BytesIO
from typing import Iterable

from docx import Document as DocxDocument
from docx.shared import Pt

from .block_renderers import BLOCK_FAILURE_PLACEHOLDER, QUOTE_CAPTION_PREFIX, TABLE_PLACEHOLDER
from .document_models import (
    ChecklistBlock,
    ChecklistItem,
    CodeBlock,
    ContentItem,
    Document,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ListItem,
    ListStyle,
    MarkupItem,
    ParagraphBlock,
    QuoteBlock,
    TableBlock,
    TextItem,
)
from .list_items import COMPLEX_OBJECT_PLACEHOLDER

logger = logging.getLogger(__name__)

_MAX_LIST_STYLE_LEVEL = 3
_CODE_FONT = "Courier New"
_LINE_BREAK_RE = re.compile(r"[\x0b\x0c]")
_XML_ILLEGAL_RE = re.compile(r"[\x00-\x08\x0e-\x1f\ufffe\uffff]")


class DocumentExportError(RuntimeError):
    """Raised when a document has nothing that can be exported."""


def _sanitize_stem(value: str) -> str:
    """Return a filesystem-safe stem for the generated document."""

    sanitized = re.sub(r"[^0-9A-Za-z_-]+", "_", value).strip("._")
    return sanitized or "article"


def _pick_filename(title: str | None) -> str:
    return f"{_sanitize_stem(title or '')}.docx"


def xml_safe(text: str) -> str:
    """Drop characters Word XML cannot hold; vertical tab and form feed become line breaks."""

    return _XML_ILLEGAL_RE.sub("", _LINE_BREAK_RE.sub("\n", text))


def markup_to_text(markup: str) -> str:
    """Flatten trusted inline markup into plain text for Word runs."""

    text = re.sub(r"<br\s*/?>", "\n", markup, flags=re.IGNORECASE)
    text = re.sub(r"<[^>]+>", "", text)
    text = xml_safe(html.unescape(text))
    text = re.sub(r"[ \t]{2,}", " ", text)
    return text.strip()


def _remove_placeholder_paragraph(document: DocxDocument) -> None:
    """Remove the placeholder paragraph that python-docx creates by default."""

    if document.paragraphs:
        paragraph = document.paragraphs[0]
        element = paragraph._element  # type: ignore[attr-defined]
        parent = element.getparent()
        if parent is not None:
            parent.remove(element)


def _table_column_count(rows: Iterable[tuple[str, ...]]) -> int:
    return max((len(row) for row in rows), default=0)


def _list_style(style: ListStyle, level: int) -> str:
    base = "List Number" if style == "ordered" else "List Bullet"
    level = min(level, _MAX_LIST_STYLE_LEVEL)
    return base if level <= 1 else f"{base} {level}"


def _checklist_text(item: ChecklistItem) -> str:
    marker = "☑" if item.checked else "☐"
    return f"{marker} {markup_to_text(item.text)}"


def _append_list_items(document: DocxDocument, items: Iterable[ListItem], style: ListStyle, level: int) -> None:
    for item in items:
        if isinstance(item, MarkupItem):
            document.add_paragraph(markup_to_text(item.markup), style=_list_style(style, level))
        elif isinstance(item, ChecklistItem):
            document.add_paragraph(_checklist_text(item), style=_list_style(style, level))
        elif isinstance(item, ContentItem):
            if item.content:
                document.add_paragraph(markup_to_text(item.content), style=_list_style(style, level))
            if item.children:
                _append_list_items(document, item.children, style, level + 1)
        elif isinstance(item, TextItem):
            document.add_paragraph(markup_to_text(item.text), style=_list_style(style, level))
        else:
            text = item.text if item.text is not None else COMPLEX_OBJECT_PLACEHOLDER
            document.add_paragraph(xml_safe(text), style=_list_style(style, level))


def _append_table(document: DocxDocument, table: TableBlock) -> None:
    rows = table.rows or ()
    column_count = _table_column_count(rows)
    if not rows or column_count == 0:
        document.add_paragraph(TABLE_PLACEHOLDER)
        return

    docx_table = document.add_table(rows=len(rows), cols=column_count)
    docx_table.style = "Table Grid"

    for row_index, row in enumerate(rows):
        for column_index in range(column_count):
            value = row[column_index] if column_index < len(row) else ""
            cell = docx_table.cell(row_index, column_index)
            cell.text = markup_to_text(value or "")
            if table.with_headings and row_index == 0:
                for run in cell.paragraphs[0].runs:
                    run.bold = True


def _append_block(document: DocxDocument, block: object) -> bool:
    """Append one block, returning ``False`` when it has no DOCX counterpart."""

    if isinstance(block, ParagraphBlock):
        document.add_paragraph(markup_to_text(block.text))
    elif isinstance(block, HeaderBlock):
        if block.level is None:
            document.add_paragraph().add_run(markup_to_text(block.text)).bold = True
        else:
            document.add_heading(markup_to_text(block.text), level=block.level)
    elif isinstance(block, ImageBlock):
        run = document.add_paragraph().add_run(xml_safe(block.caption or block.url))
        run.italic = True
    elif isinstance(block, QuoteBlock):
        document.add_paragraph(markup_to_text(block.text), style="Quote")
        if block.caption:
            document.add_paragraph(f"{QUOTE_CAPTION_PREFIX}{xml_safe(block.caption)}")
    elif isinstance(block, ListBlock):
        _append_list_items(document, block.items, block.style, 1)
    elif isinstance(block, ChecklistBlock):
        for item in block.items:
            document.add_paragraph(_checklist_text(item))
    elif isinstance(block, CodeBlock):
        run = document.add_paragraph().add_run(xml_safe(block.code))
        run.font.name = _CODE_FONT
        run.font.size = Pt(9)
    elif isinstance(block, TableBlock):
        _append_table(document, block)
    else:
        return False
    return True


def export_document_to_docx(document: Document, *, title: str | None = None) -> tuple[str, bytes]:
    """Build a DOCX file for ``document`` and return its file name and bytes."""

    docx_document = DocxDocument()
    _remove_placeholder_paragraph(docx_document)

    if title and title.strip():
        docx_document.add_heading(xml_safe(title.strip()), level=0)

    exported = 0
    for block in document.blocks:
        try:
            appended = _append_block(docx_document, block)
        except Exception:
            logger.exception("Failed to export block of type '%s'", getattr(block, "type", ""))
            docx_document.add_paragraph(BLOCK_FAILURE_PLACEHOLDER)
            appended = True
        if appended:
            exported += 1
    if exported == 0:
        raise DocumentExportError("Document has no blocks that can be exported")
    logger.info("Exported %s of %s blocks to DOCX", exported, len(document.blocks))

    buffer = BytesIO()
    docx_document.save(buffer)
    return _pick_filename(title), buffer.getvalue()


__all__ = ["DocumentExportError", "export_document_to_docx", "markup_to_text", "xml_safe"]
