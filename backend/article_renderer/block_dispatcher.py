"""Dispatch decoded blocks to their renderers with per-block failure containment."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .block_renderers import BLOCK_FAILURE_PLACEHOLDER, VARIANT_RENDERERS, render_placeholder
from .core.config import Settings
from .document_decoder import DecodeOptions, decode_document, safe_decode_block
from .document_models import Block, Document, InvalidBlock, UnknownBlock
from .render_tree import RenderNode

_default_logger = logging.getLogger(__name__)


class ContentRenderer:
    """Turn documents into render trees.

    The renderer keeps no state between calls. Unknown block types are
    reported once each through the injected ``logger`` and produce no output;
    any other failure is confined to its block and replaced by a placeholder.
    """

    def __init__(
        self,
        *,
        logger: logging.Logger | None = None,
        options: DecodeOptions | None = None,
    ) -> None:
        self._logger = logger if logger is not None else _default_logger
        self._options = options or DecodeOptions()

    @classmethod
    def from_settings(cls, settings: Settings, *, logger: logging.Logger | None = None) -> "ContentRenderer":
        options = DecodeOptions(
            max_list_depth=settings.max_list_depth,
            legacy_table_headings=settings.legacy_table_headings,
        )
        return cls(logger=logger, options=options)

    # ------------------------------------------------------------------
    def decode(self, payload: Any) -> Document:
        return decode_document(payload, self._options)

    def render_block(self, block: Block | Mapping[str, Any] | None) -> RenderNode | None:
        """Render one block, returning ``None`` when it produces no output."""

        if block is None:
            return None
        if not isinstance(block, (UnknownBlock, InvalidBlock)) and type(block) not in VARIANT_RENDERERS:
            block = safe_decode_block(block, self._options)

        if isinstance(block, UnknownBlock):
            self._logger.warning("Unknown block type '%s' skipped: %r", block.type, block.data)
            return None
        if isinstance(block, InvalidBlock):
            return render_placeholder(BLOCK_FAILURE_PLACEHOLDER, block.type)

        renderer = VARIANT_RENDERERS[type(block)]
        try:
            return renderer(block)
        except Exception:  # pragma: no cover - defensive branch
            self._logger.exception("Failed to render block of type '%s'", block.type)
            return render_placeholder(BLOCK_FAILURE_PLACEHOLDER, block.type)

    def render_document(self, payload: Any) -> list[RenderNode]:
        """Render every block of ``payload`` in order, skipping empty output."""

        document = self.decode(payload)
        nodes: list[RenderNode] = []
        for block in document.blocks:
            node = self.render_block(block)
            if node is not None:
                nodes.append(node)
        return nodes


_default_renderer = ContentRenderer()


def render_block(block: Block | Mapping[str, Any] | None) -> RenderNode | None:
    return _default_renderer.render_block(block)


def render_document(payload: Any) -> list[RenderNode]:
    return _default_renderer.render_document(payload)


__all__ = ["ContentRenderer", "render_block", "render_document"]
