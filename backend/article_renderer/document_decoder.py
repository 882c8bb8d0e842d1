"""Decode stored editor JSON into the typed document model."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from .document_models import (
    Block,
    ChecklistBlock,
    CodeBlock,
    Document,
    HeaderBlock,
    ImageBlock,
    InvalidBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
    TableBlock,
    UnknownBlock,
)
from .list_items import (
    DEFAULT_MAX_LIST_DEPTH,
    decode_checklist_item,
    decode_list_items,
    is_checklist_shaped,
    to_markup,
)
from .table_normalizer import normalize_table

logger = logging.getLogger(__name__)

CODE_EXTRACTION_PLACEHOLDER = "Unable to extract code"

_ELEMENT_MARKERS = ("textContent", "innerText", "innerHTML", "outerHTML", "nodeType", "tagName")
_ELEMENT_TEXT_PROPERTIES = ("textContent", "innerText", "innerHTML")


@dataclass(slots=True, frozen=True)
class DecodeOptions:
    """Knobs shared by the block decoders."""

    max_list_depth: int = DEFAULT_MAX_LIST_DEPTH
    legacy_table_headings: bool = False


def _plain_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _heading_level(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        level = value
    elif isinstance(value, float) and value.is_integer():
        level = int(value)
    else:
        return None
    return level if 1 <= level <= 4 else None


def _element_property(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def _is_element_like(value: Any) -> bool:
    if value is None or isinstance(value, (str, bytes, int, float, list, tuple)):
        return False
    if isinstance(value, Mapping):
        return any(marker in value for marker in _ELEMENT_MARKERS)
    return any(hasattr(value, marker) for marker in _ELEMENT_MARKERS)


def extract_code_text(value: Any) -> str:
    """Return displayable code from a string or an editor element handle.

    Element handles are read through ``textContent``, ``innerText`` and
    ``innerHTML`` in that order; when none has text the fixed
    :data:`CODE_EXTRACTION_PLACEHOLDER` is returned.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if _is_element_like(value):
        for name in _ELEMENT_TEXT_PROPERTIES:
            text = _element_property(value, name)
            if isinstance(text, str) and text:
                return text
        logger.debug("Code element exposes no readable text")
        return CODE_EXTRACTION_PLACEHOLDER
    return str(value)


def _decode_paragraph(data: Mapping[str, Any], options: DecodeOptions) -> Block:
    return ParagraphBlock(text=to_markup(data.get("text")))


def _decode_header(data: Mapping[str, Any], options: DecodeOptions) -> Block:
    return HeaderBlock(text=to_markup(data.get("text")), level=_heading_level(data.get("level")))


def _decode_image(data: Mapping[str, Any], options: DecodeOptions) -> Block:
    file_info = data.get("file")
    url = file_info.get("url") if isinstance(file_info, Mapping) else None
    if not url:
        url = data.get("url")
    return ImageBlock(url=_plain_text(url), caption=_plain_text(data.get("caption")))


def _decode_quote(data: Mapping[str, Any], options: DecodeOptions) -> Block:
    return QuoteBlock(text=to_markup(data.get("text")), caption=_plain_text(data.get("caption")))


def _decode_list(data: Mapping[str, Any], options: DecodeOptions) -> Block:
    raw_items = data.get("items")
    if is_checklist_shaped(raw_items):
        return ChecklistBlock(items=tuple(decode_checklist_item(item) for item in raw_items))
    style = "ordered" if data.get("style") == "ordered" else "unordered"
    return ListBlock(style=style, items=decode_list_items(raw_items, max_depth=options.max_list_depth))


def _decode_checklist(data: Mapping[str, Any], options: DecodeOptions) -> Block:
    raw_items = data.get("items")
    if not isinstance(raw_items, list):
        return ChecklistBlock()
    return ChecklistBlock(items=tuple(decode_checklist_item(item) for item in raw_items))


def _decode_code(data: Mapping[str, Any], options: DecodeOptions) -> Block:
    return CodeBlock(code=extract_code_text(data.get("code")), language=_plain_text(data.get("language")).strip())


def _decode_table(data: Mapping[str, Any], options: DecodeOptions) -> Block:
    content = data.get("content")
    if content is None:
        content = data.get("text")
    table = normalize_table(
        content,
        data.get("withHeadings"),
        legacy_headings=options.legacy_table_headings,
    )
    if table is None:
        return TableBlock(rows=None)
    return TableBlock(rows=table.rows, with_headings=table.with_headings)


_DECODERS: dict[str, Callable[[Mapping[str, Any], DecodeOptions], Block]] = {
    "paragraph": _decode_paragraph,
    "header": _decode_header,
    "image": _decode_image,
    "quote": _decode_quote,
    "list": _decode_list,
    "checklist": _decode_checklist,
    "todo": _decode_checklist,
    "code": _decode_code,
    "table": _decode_table,
}


def block_type_of(raw: Any) -> str:
    if isinstance(raw, Mapping):
        value = raw.get("type")
        if isinstance(value, str):
            return value
    return ""


def decode_block(raw: Any, options: DecodeOptions | None = None) -> Block:
    """Decode one ``{type, data}`` mapping into its block variant."""

    options = options or DecodeOptions()
    block_type = block_type_of(raw)
    data = raw.get("data") if isinstance(raw, Mapping) else None
    if not isinstance(data, Mapping):
        data = {}

    decoder = _DECODERS.get(block_type)
    if decoder is None:
        return UnknownBlock(type=block_type, data=dict(data))
    return decoder(data, options)


def safe_decode_block(raw: Any, options: DecodeOptions | None = None) -> Block:
    """Like :func:`decode_block` but turns any failure into :class:`InvalidBlock`."""

    try:
        return decode_block(raw, options)
    except Exception as exc:  # pragma: no cover - defensive branch
        block_type = block_type_of(raw)
        logger.exception("Failed to decode block of type '%s'", block_type)
        return InvalidBlock(type=block_type, reason=str(exc) or exc.__class__.__name__)


def _extract_blocks(payload: Any) -> tuple[Any, str | None, int | None]:
    if isinstance(payload, list):
        return payload, None, None
    if not isinstance(payload, Mapping):
        return [], None, None

    if "blocks" in payload:
        version = payload.get("version")
        time = payload.get("time")
        return (
            payload.get("blocks"),
            version if isinstance(version, str) else None,
            time if isinstance(time, int) and not isinstance(time, bool) else None,
        )

    # Article records wrap the editor output as ``content: [{blocks: [...]}]``.
    content = payload.get("content")
    if isinstance(content, list) and content:
        return _extract_blocks(content[0])
    if isinstance(content, Mapping):
        return _extract_blocks(content)
    return [], None, None


def decode_document(payload: Any, options: DecodeOptions | None = None) -> Document:
    """Decode a stored document payload.

    Accepted shapes are a bare list of blocks, editor save output
    (``{"time", "blocks", "version"}``) and an article record carrying it
    under ``content``. ``None`` and unrecognised payloads decode to an empty
    document.
    """

    if isinstance(payload, Document):
        return payload
    if payload is None:
        return Document()

    options = options or DecodeOptions()
    raw_blocks, version, time = _extract_blocks(payload)
    if not isinstance(raw_blocks, list):
        logger.warning("Document payload has no block list: %r", type(raw_blocks).__name__)
        return Document(version=version, time=time)

    blocks = tuple(safe_decode_block(raw, options) for raw in raw_blocks)
    return Document(blocks=blocks, version=version, time=time)


__all__ = [
    "CODE_EXTRACTION_PLACEHOLDER",
    "DecodeOptions",
    "block_type_of",
    "decode_block",
    "decode_document",
    "extract_code_text",
    "safe_decode_block",
]
