"""Unit tests for plain-text table rendering."""

from __future__ import annotations

from array_asserts.reporting import render_table


def test_columns_are_aligned_and_trailing_space_stripped() -> None:
    rendered = render_table(("A", "Bee"), [("x", "y"), ("long", "")])

    assert rendered.splitlines() == [
        "A     Bee",
        "----  ---",
        "x     y",
        "long",
    ]


def test_custom_gap() -> None:
    assert render_table(("A", "B"), [("1", "2")], gap=0) == "AB\n--\n12"
    assert render_table(("A", "B"), [("1", "2")], gap=4) == "A    B\n-    -\n1    2"


def test_missing_cells_are_blank_and_extra_cells_dropped() -> None:
    rendered = render_table(("A", "B"), [("1",), ("1", "2", "3")])

    assert rendered == "A  B\n-  -\n1\n1  2"


def test_header_only() -> None:
    assert render_table(("Key", "Value"), []) == "Key  Value\n---  -----"
