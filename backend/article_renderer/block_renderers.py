"""Pure renderers, one per block variant."""
from __future__ import annotations

from typing import Callable

from .document_models import (
    ChecklistBlock,
    CodeBlock,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
    TableBlock,
)
from .list_items import render_checklist_entry, render_list_container
from .render_tree import RenderNode, element

TABLE_PLACEHOLDER = "Table content missing or invalid"
BLOCK_FAILURE_PLACEHOLDER = "This block could not be displayed"
DEFAULT_IMAGE_ALT = "Blog image"
QUOTE_CAPTION_PREFIX = "— "

HEADER_STYLES: dict[int, tuple[str, str]] = {
    1: ("h1", "text-5xl font-bold my-6"),
    2: ("h2", "text-4xl font-bold my-5"),
    3: ("h3", "text-3xl font-bold my-4"),
    4: ("h4", "text-2xl font-bold my-3"),
}
# Levels outside 1..4 become an emphasized paragraph, not a heading.
FALLBACK_HEADER_STYLE = ("p", "text-xl font-semibold my-4")

TABLE_EVEN_ROW_CLASS = "bg-white dark:bg-gray-900"
TABLE_ODD_ROW_CLASS = "bg-gray-50 dark:bg-gray-800/50"
_TABLE_CELL_CLASS = "border border-gray-200 dark:border-gray-700 px-4 py-2"
_TABLE_HEADING_CLASS = "border border-gray-200 dark:border-gray-700 px-4 py-2 font-semibold text-left"
_PLACEHOLDER_CLASS = "my-4 p-3 rounded-lg border border-red-300 text-red-600 dark:text-red-400 text-sm"


def render_paragraph(block: ParagraphBlock) -> RenderNode:
    return element("p", "my-4", html=block.text)


def render_header(block: HeaderBlock) -> RenderNode:
    tag, class_name = HEADER_STYLES.get(block.level or 0, FALLBACK_HEADER_STYLE)
    return element(tag, class_name, html=block.text)


def render_image(block: ImageBlock) -> RenderNode:
    image = element(
        "img",
        "w-full rounded-lg",
        props={"src": block.url, "alt": block.caption or DEFAULT_IMAGE_ALT},
    )
    if not block.caption:
        return element("div", "", image)
    caption = element(
        "p",
        "w-full text-center my-3 md:mb-12 text-base text-gray-600 dark:text-gray-400",
        text=block.caption,
    )
    return element("div", "", image, caption)


def render_quote(block: QuoteBlock) -> RenderNode:
    body = element("p", "text-xl leading-10 md:text-2xl font-serif italic", html=block.text)
    parts = [body]
    if block.caption:
        parts.append(
            element(
                "p",
                "w-full text-primary-600 dark:text-primary-400 text-base mt-2",
                text=f"{QUOTE_CAPTION_PREFIX}{block.caption}",
            )
        )
    return element(
        "blockquote",
        "bg-primary-100/30 dark:bg-primary-900/20 p-3 pl-5 border-l-4 border-primary-500 rounded-r-lg my-4",
        *parts,
    )


def render_list(block: ListBlock) -> RenderNode:
    return render_list_container(block.style, block.items)


def render_checklist(block: ChecklistBlock) -> RenderNode:
    return element("div", "my-4 pl-2", *[render_checklist_entry(item) for item in block.items])


def render_code(block: CodeBlock) -> RenderNode:
    code_class = f"language-{block.language}" if block.language else ""
    props = {"data-language": block.language} if block.language else None
    return element(
        "pre",
        "bg-gray-100 dark:bg-black p-4 rounded-lg my-4 overflow-x-auto font-mono",
        element("code", code_class, text=block.code, props=props),
    )


def render_table(block: TableBlock) -> RenderNode:
    """Render the normalized grid, striping body rows by zero-based index."""

    if not block.rows:
        return render_placeholder(TABLE_PLACEHOLDER, "table")

    rows = list(block.rows)
    sections: list[RenderNode] = []
    if block.with_headings:
        heading, body = rows[0], rows[1:]
        cells = [element("th", _TABLE_HEADING_CLASS, html=cell) for cell in heading]
        sections.append(element("thead", "bg-gray-100 dark:bg-gray-800", element("tr", "", *cells)))
    else:
        body = rows

    body_rows = []
    for index, row in enumerate(body):
        row_class = TABLE_EVEN_ROW_CLASS if index % 2 == 0 else TABLE_ODD_ROW_CLASS
        cells = [element("td", _TABLE_CELL_CLASS, html=cell) for cell in row]
        body_rows.append(element("tr", row_class, *cells))
    sections.append(element("tbody", "", *body_rows))

    return element(
        "div",
        "overflow-x-auto my-6",
        element("table", "min-w-full border-collapse text-sm", *sections),
    )


def render_placeholder(message: str, block_type: str) -> RenderNode:
    """Visible stand-in for a block whose data could not be shown."""

    return element(
        "div",
        _PLACEHOLDER_CLASS,
        text=message,
        props={"role": "note", "data-block-type": block_type},
    )


VARIANT_RENDERERS: dict[type, Callable[..., RenderNode]] = {
    ParagraphBlock: render_paragraph,
    HeaderBlock: render_header,
    ImageBlock: render_image,
    QuoteBlock: render_quote,
    ListBlock: render_list,
    ChecklistBlock: render_checklist,
    CodeBlock: render_code,
    TableBlock: render_table,
}


__all__ = [
    "BLOCK_FAILURE_PLACEHOLDER",
    "DEFAULT_IMAGE_ALT",
    "FALLBACK_HEADER_STYLE",
    "HEADER_STYLES",
    "QUOTE_CAPTION_PREFIX",
    "TABLE_EVEN_ROW_CLASS",
    "TABLE_ODD_ROW_CLASS",
    "TABLE_PLACEHOLDER",
    "VARIANT_RENDERERS",
    "render_checklist",
    "render_code",
    "render_header",
    "render_image",
    "render_list",
    "render_paragraph",
    "render_placeholder",
    "render_quote",
    "render_table",
]
