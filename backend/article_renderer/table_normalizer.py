"""Normalize the two authoring shapes of table content into one grid."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .document_models import Markup

_SEPARATOR_ROW_RE = re.compile(r"^[\s|:]*-{3,}[\s|:-]*$")


@dataclass(slots=True, frozen=True)
class NormalizedTable:
    """Row-major grid plus the effective heading flag."""

    rows: tuple[tuple[Markup, ...], ...]
    with_headings: bool

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)


def resolve_with_headings(value: Any, *, legacy: bool = False) -> bool:
    """Return the effective ``withHeadings`` flag.

    A missing value means headings. With ``legacy`` enabled the stored value
    is coalesced the way the old front end did (``value || true``), which
    makes an explicit ``false`` impossible to express.
    """

    if legacy:
        return True
    if value is None:
        return True
    return bool(value)


def split_delimited_rows(text: str) -> list[list[str]]:
    """Split pipe-delimited text into trimmed cells.

    Empty cells created by a leading or trailing ``|`` are dropped while inner
    empty cells are kept so columns stay aligned. Escaped or quoted
    delimiters are not understood.
    """

    rows: list[list[str]] = []
    for line in text.splitlines():
        record = line.strip()
        if not record or _SEPARATOR_ROW_RE.match(record):
            continue
        cells = [cell.strip() for cell in record.split("|")]
        if cells and not cells[0]:
            cells = cells[1:]
        if cells and not cells[-1]:
            cells = cells[:-1]
        if cells:
            rows.append(cells)
    return rows


def _is_grid(content: Any) -> bool:
    if not isinstance(content, (list, tuple)):
        return False
    return all(isinstance(row, (list, tuple)) for row in content)


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def normalize_table(content: Any, with_headings: Any = None, *, legacy_headings: bool = False) -> NormalizedTable | None:
    """Turn delimited text or a pre-parsed grid into a :class:`NormalizedTable`.

    Returns ``None`` when ``content`` is neither shape or yields no rows.
    """

    if isinstance(content, str):
        raw_rows = split_delimited_rows(content)
    elif _is_grid(content):
        raw_rows = [[_cell_text(cell) for cell in row] for row in content]
    else:
        return None

    rows = tuple(tuple(Markup(cell) for cell in row) for row in raw_rows if row)
    if not rows:
        return None
    return NormalizedTable(
        rows=rows,
        with_headings=resolve_with_headings(with_headings, legacy=legacy_headings),
    )


__all__ = ["NormalizedTable", "normalize_table", "resolve_with_headings", "split_delimited_rows"]
