"""Plain-text table rendering for diagnostic failure output.

Produces clean, deterministic plain-text output with no terminal styling, so
the result can be embedded verbatim in an assertion message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from array_asserts.constants import DEFAULT_TABLE_COLUMN_GAP

if TYPE_CHECKING:
    from collections.abc import Sequence


def render_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    gap: int = DEFAULT_TABLE_COLUMN_GAP,
) -> str:
    """Render an aligned table: header line, dash rule, then one line per row.

    Cells beyond the header count are dropped and missing cells render blank.
    Trailing whitespace is stripped from every line.
    """

    width = len(headers)
    grid = [list(headers)] + [
        [str(cell) for cell in row[:width]] + [""] * (width - len(row)) for row in rows
    ]
    columns = [max(len(line[index]) for line in grid) for index in range(width)]
    joiner = " " * gap

    def _line(cells: Sequence[str]) -> str:
        return joiner.join(cell.ljust(size) for cell, size in zip(cells, columns)).rstrip()

    rendered = [_line(grid[0]), joiner.join("-" * size for size in columns)]
    rendered.extend(_line(cells) for cells in grid[1:])
    return "\n".join(rendered)


__all__ = ["render_table"]
