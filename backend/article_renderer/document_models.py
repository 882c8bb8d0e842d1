"""Decoded document model shared by the decoder, renderers and exporters."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

ListStyle = Literal["ordered", "unordered"]


class Markup(str):
    """Rich-text markup that was sanitized before it reached this service.

    Only the decoder builds instances, and only from fields the storage
    contract declares as trusted markup. Serializers emit it verbatim while
    every plain ``str`` is escaped.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Markup({str.__repr__(self)})"


@dataclass(slots=True, frozen=True)
class MarkupItem:
    """List entry given as a bare markup string."""

    markup: Markup


@dataclass(slots=True, frozen=True)
class ChecklistItem:
    """Checklist entry, either standalone or inside a list."""

    checked: bool
    text: Markup


@dataclass(slots=True, frozen=True)
class ContentItem:
    """List entry with optional own content and an optional nested list."""

    content: Markup | None
    children: tuple["ListItem", ...] | None = None


@dataclass(slots=True, frozen=True)
class TextItem:
    """List entry object that only carries a ``text`` field."""

    text: Markup


@dataclass(slots=True, frozen=True)
class OpaqueItem:
    """List entry of an unrecognised shape.

    ``text`` holds the best-effort stringification, ``None`` when the value
    could not be stringified at all.
    """

    text: str | None


ListItem = MarkupItem | ChecklistItem | ContentItem | TextItem | OpaqueItem


@dataclass(slots=True, frozen=True)
class ParagraphBlock:
    text: Markup = Markup("")
    type: Literal["paragraph"] = "paragraph"


@dataclass(slots=True, frozen=True)
class HeaderBlock:
    text: Markup = Markup("")
    level: int | None = None
    type: Literal["header"] = "header"


@dataclass(slots=True, frozen=True)
class ImageBlock:
    url: str = ""
    caption: str = ""
    type: Literal["image"] = "image"


@dataclass(slots=True, frozen=True)
class QuoteBlock:
    text: Markup = Markup("")
    caption: str = ""
    type: Literal["quote"] = "quote"


@dataclass(slots=True, frozen=True)
class ListBlock:
    style: ListStyle = "unordered"
    items: tuple[ListItem, ...] = ()
    type: Literal["list"] = "list"


@dataclass(slots=True, frozen=True)
class ChecklistBlock:
    items: tuple[ChecklistItem, ...] = ()
    type: Literal["checklist"] = "checklist"


@dataclass(slots=True, frozen=True)
class CodeBlock:
    code: str = ""
    language: str = ""
    type: Literal["code"] = "code"


@dataclass(slots=True, frozen=True)
class TableBlock:
    """Table with a normalized grid; ``rows`` is ``None`` for unusable content."""

    rows: tuple[tuple[Markup, ...], ...] | None = None
    with_headings: bool = True
    type: Literal["table"] = "table"


@dataclass(slots=True, frozen=True)
class UnknownBlock:
    """Block whose type is outside the supported set."""

    type: str
    data: dict[str, Any] = field(default_factory=dict, hash=False)


@dataclass(slots=True, frozen=True)
class InvalidBlock:
    """Block of a known type that could not be decoded."""

    type: str
    reason: str


Block = (
    ParagraphBlock
    | HeaderBlock
    | ImageBlock
    | QuoteBlock
    | ListBlock
    | ChecklistBlock
    | CodeBlock
    | TableBlock
    | UnknownBlock
    | InvalidBlock
)


@dataclass(slots=True, frozen=True)
class Document:
    """Ordered blocks of one article body."""

    blocks: tuple[Block, ...] = ()
    version: str | None = None
    time: int | None = None

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    @property
    def unknown_types(self) -> list[str]:
        return [block.type for block in self.blocks if isinstance(block, UnknownBlock)]


__all__ = [
    "Block",
    "ChecklistBlock",
    "ChecklistItem",
    "CodeBlock",
    "ContentItem",
    "Document",
    "HeaderBlock",
    "ImageBlock",
    "InvalidBlock",
    "ListBlock",
    "ListItem",
    "ListStyle",
    "Markup",
    "MarkupItem",
    "OpaqueItem",
    "ParagraphBlock",
    "QuoteBlock",
    "TableBlock",
    "TextItem",
    "UnknownBlock",
]
