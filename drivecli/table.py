"""Writing rows as text columns aligned by elastic tabstops."""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

_PADDING = 3
_MIN_WIDTH = 2


@dataclass
class Table:
    """A header row and value rows with the same number of columns."""

    header: Sequence[Any]
    values: list[Sequence[Any]] = field(default_factory=list)


@dataclass
class DisplayConfig:
    """How a table is written."""

    skip_header: bool = False
    separator: str = "\t"


def _display_width(text: str) -> int:
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def _column_widths(lines: list[list[str]]) -> list[list[int]]:
    widths: list[list[int]] = [[] for _ in lines]
    for i, cells in enumerate(lines):
        for col in range(len(widths[i]), len(cells) - 1):
            width = _MIN_WIDTH
            block = 0
            for later in lines[i:]:
                if col + 1 >= len(later):
                    break
                block += 1
                width = max(width, _display_width(later[col]) + _PADDING)
            for row in widths[i : i + block]:
                row.append(width)
    return widths


def _align(lines: list[str]) -> str:
    cells = [line.split("\t") for line in lines]
    widths = _column_widths(cells)
    out = []
    for row_cells, row_widths in zip(cells, widths):
        parts = []
        for col, cell in enumerate(row_cells):
            if col < len(row_widths):
                parts.append(cell + " " * (row_widths[col] - _display_width(cell)))
            else:
                parts.append(cell)
        out.append("".join(parts) + "\n")
    return "".join(out)


def write(stream: TextIO, table: Table, config: DisplayConfig | None = None) -> None:
    """Write ``table`` to ``stream``, aligning tab separated columns."""
    config = config or DisplayConfig()
    rows = list(table.values)
    if not config.skip_header:
        rows.insert(0, table.header)
    lines = [config.separator.join(str(column) for column in row) for row in rows]
    stream.write(_align(lines))
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()