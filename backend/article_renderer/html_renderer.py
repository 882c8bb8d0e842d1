"""Serialize render trees into HTML fragments."""
from __future__ import annotations

from html import escape
from typing import Any, Iterable

from .render_tree import RenderNode

_VOID_TAGS = frozenset({"img", "br", "hr"})
_ICON_PATHS = {
    "check": "M5 13l4 4L19 7",
    "square": "M6 6h12v12H6z",
}


def _attribute(name: str, value: Any) -> str | None:
    if value is None or value is False:
        return None
    if name == "className":
        name = "class"
    if value is True:
        return name
    return f'{name}="{escape(str(value), quote=True)}"'


def _open_tag(tag: str, props: dict[str, Any]) -> str:
    attributes = [attr for attr in (_attribute(k, v) for k, v in props.items()) if attr]
    if not attributes:
        return f"<{tag}>"
    return f"<{tag} {' '.join(attributes)}>"


def _icon_to_svg(node: RenderNode) -> str:
    path = _ICON_PATHS.get(str(node.props.get("name")), _ICON_PATHS["square"])
    class_attr = _attribute("className", node.props.get("className"))
    prefix = f"<svg {class_attr} " if class_attr else "<svg "
    return (
        f'{prefix}fill="none" viewBox="0 0 24 24" stroke="currentColor" aria-hidden="true">'
        f'<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="{path}"/></svg>'
    )


def node_to_html(node: RenderNode) -> str:
    """Serialize one node; plain text is escaped and markup is kept verbatim."""

    if node.tag == "icon":
        return _icon_to_svg(node)

    inner: list[str] = []
    if node.text is not None:
        inner.append(escape(node.text, quote=False))
    if node.html is not None:
        inner.append(str(node.html))
    inner.extend(node_to_html(child) for child in node.children)

    if node.tag == "fragment":
        return "".join(inner)
    if node.tag in _VOID_TAGS:
        return _open_tag(node.tag, node.props)
    return f"{_open_tag(node.tag, node.props)}{''.join(inner)}</{node.tag}>"


def render_html(nodes: RenderNode | Iterable[RenderNode], *, separator: str = "\n") -> str:
    """Serialize a node or a sequence of top-level nodes."""

    if isinstance(nodes, RenderNode):
        return node_to_html(nodes)
    return separator.join(node_to_html(node) for node in nodes)


__all__ = ["node_to_html", "render_html"]
