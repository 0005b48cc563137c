from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol, Sequence

from ..errors import RenderError
from ..utils import as_text


class Writer(Protocol):
    def write(self, text: str) -> object: ...


class Align(enum.Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class Column:
    name: str
    align: Align = Align.NONE
    mapping: Optional[Callable[[Any], Any]] = None


@dataclass
class Table:
    columns: List[Column]
    rows: List[Sequence[Any]] = field(default_factory=list)


def yes_no(value: Any) -> str:
    return "yes" if value else "no"


def escape_cell(text: str) -> str:
    """Keep a value on one table row and inside its own cell."""
    text = text.replace("\r\n", "\n").replace("\r", "")
    text = text.replace("|", "\\|")
    return "<br>".join(text.split("\n"))


def _cell(column: Column, value: Any) -> str:
    if column.mapping is not None:
        value = column.mapping(value)
    return escape_cell("" if value is None else as_text(value))


def _separator(align: Align, width: int) -> str:
    start = ":" if align in (Align.LEFT, Align.CENTER) else "-"
    end = ":" if align in (Align.RIGHT, Align.CENTER) else "-"
    return start + "-" * width + end


def markdown_table(w: Writer, table: Table) -> None:
    """Write ``table`` to ``w`` as a markdown table with aligned pipes."""
    if len(table.columns) < 1:
        raise RenderError("no columns to render")

    header = [escape_cell(c.name) for c in table.columns]
    body: List[List[str]] = []
    for i, row in enumerate(table.rows):
        if len(row) != len(table.columns):
            raise RenderError(f"row {i} has {len(row)} cells, expected {len(table.columns)}")
        body.append([_cell(c, v) for c, v in zip(table.columns, row)])

    widths = [len(h) for h in header]
    for cells in body:
        widths = [max(wd, len(c)) for wd, c in zip(widths, cells)]

    def line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(c.ljust(wd) for c, wd in zip(cells, widths)) + " |\n"

    w.write(line(header))
    w.write("|" + "|".join(_separator(c.align, wd) for c, wd in zip(table.columns, widths)) + "|\n")
    for cells in body:
        w.write(line(cells))
