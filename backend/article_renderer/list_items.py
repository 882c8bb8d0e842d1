"""Decoding and rendering of heterogeneous list entries."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from .document_models import (
    ChecklistItem,
    ContentItem,
    ListItem,
    ListStyle,
    Markup,
    MarkupItem,
    OpaqueItem,
    TextItem,
)
from .render_tree import RenderNode, element

logger = logging.getLogger(__name__)

DEFAULT_MAX_LIST_DEPTH = 32
COMPLEX_OBJECT_PLACEHOLDER = "[Complex Object]"

_LIST_CLASSES = {"ordered": "list-decimal", "unordered": "list-disc"}
_CHECK_ICON_CLASS = "h-5 w-5 text-green-500"
_EMPTY_ICON_CLASS = "h-5 w-5 text-gray-400"
_CHECKED_TEXT_CLASS = "text-gray-500 dark:text-gray-400 line-through"


def to_markup(value: Any) -> Markup:
    """Wrap a trusted markup field; anything that is not a string becomes empty markup."""

    if isinstance(value, Markup):
        return value
    if isinstance(value, str):
        return Markup(value)
    return Markup("")


def stringify_item(value: Any) -> str | None:
    """Best-effort JSON rendition of an unrecognised entry."""

    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError):
        return None


def decode_checklist_item(raw: Any) -> ChecklistItem:
    if isinstance(raw, Mapping):
        return ChecklistItem(checked=bool(raw.get("checked")), text=to_markup(raw.get("text")))
    if isinstance(raw, str):
        return ChecklistItem(checked=False, text=Markup(raw))
    return ChecklistItem(checked=False, text=Markup(""))


def decode_list_item(raw: Any, *, depth: int = 0, max_depth: int = DEFAULT_MAX_LIST_DEPTH) -> ListItem:
    """Classify one raw entry into a :data:`ListItem` case, first match wins."""

    if isinstance(raw, str):
        return MarkupItem(Markup(raw))
    if depth > max_depth:
        logger.debug("List nesting deeper than %s levels, entry replaced", max_depth)
        return OpaqueItem(None)
    if isinstance(raw, Mapping):
        if "checked" in raw:
            return decode_checklist_item(raw)

        content = raw.get("content")
        nested = raw.get("items")
        has_nested = isinstance(nested, list)
        # An empty ``items`` list is the editor's leaf shape, not a nested list.
        children = decode_list_items(nested, depth=depth + 1, max_depth=max_depth) if has_nested else ()

        if isinstance(content, str) and content:
            return ContentItem(content=Markup(content), children=children or None)
        if has_nested:
            return ContentItem(content=None, children=children or None)

        text = raw.get("text")
        if isinstance(text, str) and text:
            return TextItem(Markup(text))
    return OpaqueItem(stringify_item(raw))


def decode_list_items(
    raw_items: Any, *, depth: int = 0, max_depth: int = DEFAULT_MAX_LIST_DEPTH
) -> tuple[ListItem, ...]:
    if not isinstance(raw_items, list):
        return ()
    return tuple(decode_list_item(item, depth=depth, max_depth=max_depth) for item in raw_items)


def is_checklist_shaped(raw_items: Any) -> bool:
    """A list is treated as a checklist when its first entry carries ``checked``."""

    if not isinstance(raw_items, list) or not raw_items:
        return False
    first = raw_items[0]
    return isinstance(first, Mapping) and "checked" in first


def render_checklist_entry(item: ChecklistItem) -> RenderNode:
    if item.checked:
        icon = element("icon", _CHECK_ICON_CLASS, props={"name": "check", "checked": True})
        body = element("div", _CHECKED_TEXT_CLASS, html=item.text)
    else:
        icon = element("icon", _EMPTY_ICON_CLASS, props={"name": "square", "checked": False})
        body = element("div", html=item.text)
    return element("div", "flex items-start gap-2 my-1", element("div", "mt-1 flex-shrink-0", icon), body)


def render_list_container(style: ListStyle, items: tuple[ListItem, ...], *, nested: bool = False) -> RenderNode:
    tag = "ol" if style == "ordered" else "ul"
    marker = _LIST_CLASSES.get(style, "list-disc")
    if nested:
        entries = [element("li", "my-1", resolve_list_item(item, style)) for item in items]
        return element(tag, f"{marker} pl-5", *entries)
    entries = [element("li", "my-2", resolve_list_item(item, style)) for item in items]
    return element(tag, f"pl-5 {marker} my-4", *entries)


def resolve_list_item(item: ListItem, style: ListStyle) -> RenderNode:
    """Render one decoded list entry; nested lists keep the parent ``style``."""

    if isinstance(item, MarkupItem):
        return element("span", html=item.markup)
    if isinstance(item, ChecklistItem):
        return render_checklist_entry(item)
    if isinstance(item, ContentItem):
        if not item.children:
            return element("span", html=item.content)
        parts = []
        if item.content:
            parts.append(element("span", html=item.content))
        parts.append(render_list_container(style, item.children, nested=True))
        return element("fragment", "", *parts)
    if isinstance(item, TextItem):
        return element("span", html=item.text)
    if item.text is None:
        return element("span", text=COMPLEX_OBJECT_PLACEHOLDER)
    return element("span", text=item.text)


__all__ = [
    "COMPLEX_OBJECT_PLACEHOLDER",
    "DEFAULT_MAX_LIST_DEPTH",
    "decode_checklist_item",
    "decode_list_item",
    "decode_list_items",
    "is_checklist_shaped",
    "render_checklist_entry",
    "render_list_container",
    "resolve_list_item",
    "stringify_item",
    "to_markup",
]
