"""Toolkit-agnostic render tree produced by the block renderers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from .document_models import Markup


@dataclass(slots=True)
class RenderNode:
    """One element of the render tree.

    Parameters
    ----------
    tag:
        Element name understood by the hosting view layer (``p``, ``h2``,
        ``table``, ``icon`` ...).
    props:
        Element attributes. ``className`` carries the style hook.
    children:
        Nested elements in display order.
    text:
        Plain text content, escaped by serializers.
    html:
        Trusted markup content, emitted verbatim by serializers.
    """

    tag: str
    props: dict[str, Any] = field(default_factory=dict)
    children: list["RenderNode"] = field(default_factory=list)
    text: str | None = None
    html: Markup | None = None

    @property
    def class_name(self) -> str:
        return str(self.props.get("className", ""))

    def iter_nodes(self) -> Iterator["RenderNode"]:
        """Yield this node and all descendants depth-first."""

        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def find_all(self, tag: str) -> list["RenderNode"]:
        return [node for node in self.iter_nodes() if node.tag == tag]

    def text_content(self) -> str:
        """Concatenate text and markup of the subtree, markup tags included."""

        parts: list[str] = []
        for node in self.iter_nodes():
            if node.text is not None:
                parts.append(node.text)
            if node.html is not None:
                parts.append(str(node.html))
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"tag": self.tag}
        if self.props:
            payload["props"] = dict(self.props)
        if self.text is not None:
            payload["text"] = self.text
        if self.html is not None:
            payload["html"] = str(self.html)
        if self.children:
            payload["children"] = [child.to_dict() for child in self.children]
        return payload


def element(
    tag: str,
    class_name: str = "",
    *children: RenderNode,
    text: str | None = None,
    html: Markup | None = None,
    props: Mapping[str, Any] | None = None,
) -> RenderNode:
    """Shorthand for building a :class:`RenderNode`."""

    attributes: dict[str, Any] = {}
    if class_name:
        attributes["className"] = class_name
    if props:
        attributes.update(props)
    return RenderNode(tag=tag, props=attributes, children=list(children), text=text, html=html)


__all__ = ["RenderNode", "element"]
