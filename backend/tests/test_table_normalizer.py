"""Unit tests for table content normalization."""

from __future__ import annotations

import pytest

from article_renderer.table_normalizer import normalize_table, resolve_with_headings, split_delimited_rows


def test_delimited_text_becomes_grid() -> None:
    table = normalize_table("a | b\nc | d")

    assert table is not None
    assert table.rows == (("a", "b"), ("c", "d"))
    assert table.with_headings is True
    assert table.column_count == 2


def test_outer_delimiters_are_dropped_but_inner_empty_cells_kept() -> None:
    assert split_delimited_rows("| a | b |\n| c | d |") == [["a", "b"], ["c", "d"]]
    assert split_delimited_rows("a || c") == [["a", "", "c"]]


def test_blank_lines_and_separator_rows_are_skipped() -> None:
    text = "| Name | Qty |\r\n|---|:---:|\r\n\r\n| Chair | 10 |\n"

    assert split_delimited_rows(text) == [["Name", "Qty"], ["Chair", "10"]]


def test_grid_is_used_without_trimming() -> None:
    table = normalize_table([[" a ", None, 3], ["b"]], True)

    assert table is not None
    assert table.rows == ((" a ", "", "3"), ("b",))


def test_string_and_grid_shapes_are_equivalent() -> None:
    from_text = normalize_table("Name | Qty\nChair | 10", False)
    from_grid = normalize_table([["Name", "Qty"], ["Chair", "10"]], False)

    assert from_text == from_grid


@pytest.mark.parametrize("content", [None, 42, {"rows": []}, "", "  \n  ", [], [[]], ["a", "b"]])
def test_unusable_content_is_reported_as_invalid(content: object) -> None:
    assert normalize_table(content) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, True), (True, True), (False, False), (0, False), (1, True)],
)
def test_with_headings_defaults_to_true_only_when_unset(value: object, expected: bool) -> None:
    assert resolve_with_headings(value) is expected


def test_legacy_coalescing_cannot_disable_headings() -> None:
    assert resolve_with_headings(False, legacy=True) is True
    table = normalize_table("a | b", False, legacy_headings=True)
    assert table is not None and table.with_headings is True
