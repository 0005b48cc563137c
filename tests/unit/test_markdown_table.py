from __future__ import annotations

import io

import pytest

from tfdocgen.errors import RenderError
from tfdocgen.render.markdown import Align, Column, Table, escape_cell, markdown_table, yes_no


def _render(table: Table) -> str:
    buf = io.StringIO()
    markdown_table(buf, table)
    return buf.getvalue()


def test_columns_are_padded_and_separator_carries_alignment() -> None:
    table = Table(
        columns=[
            Column("Name"),
            Column("Description", Align.LEFT),
            Column("Required", Align.CENTER, mapping=yes_no),
        ],
        rows=[["a", "x", True], ["long_name", "d|e", False]],
    )

    assert _render(table).splitlines() == [
        "| Name      | Description | Required |",
        "|-----------|:------------|:--------:|",
        "| a         | x           | yes      |",
        "| long_name | d\\|e        | no       |",
    ]


def test_right_alignment_marker() -> None:
    out = _render(Table(columns=[Column("N", Align.RIGHT)], rows=[["123"]]))
    assert out.splitlines()[1] == "|----:|"


def test_header_only_when_no_rows() -> None:
    out = _render(Table(columns=[Column("Name"), Column("Sensitive", Align.CENTER)]))
    assert out == "| Name | Sensitive |\n|------|:---------:|\n"


def test_no_columns_is_an_error() -> None:
    with pytest.raises(RenderError, match="no columns to render"):
        _render(Table(columns=[]))


def test_ragged_row_is_an_error() -> None:
    with pytest.raises(RenderError):
        _render(Table(columns=[Column("a"), Column("b")], rows=[["only one"]]))


def test_escape_cell_keeps_value_on_one_row() -> None:
    assert escape_cell("a|b") == "a\\|b"
    assert escape_cell("line one\r\nline two\nthree") == "line one<br>line two<br>three"


def test_none_cells_render_empty_and_bools_as_words() -> None:
    out = _render(Table(columns=[Column("a"), Column("b")], rows=[[None, False]]))
    assert out.splitlines()[2] == "|   | false |"
