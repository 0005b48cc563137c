from __future__ import annotations

from typing import List

from .markdown import Align, Column, Table, Writer, markdown_table, yes_no
from ..extract.models import ModuleVar

INPUT_COLUMNS = [
    Column("Name", Align.NONE),
    Column("Description", Align.LEFT),
    Column("Type", Align.CENTER),
    Column("Default", Align.CENTER),
    Column("Required", Align.CENTER, mapping=yes_no),
]

OUTPUT_COLUMNS = [
    Column("Name", Align.NONE),
    Column("Description", Align.LEFT),
    Column("Sensitive", Align.CENTER, mapping=yes_no),
]


def inputs_table(rows: List[ModuleVar]) -> Table:
    return Table(
        columns=INPUT_COLUMNS,
        rows=[[r.name, r.description, r.var_type, r.default, r.required] for r in rows],
    )


def outputs_table(rows: List[ModuleVar]) -> Table:
    return Table(
        columns=OUTPUT_COLUMNS,
        rows=[[r.name, r.description, r.sensitive] for r in rows],
    )


def render_readme(w: Writer, *, title: str, inputs: List[ModuleVar], outputs: List[ModuleVar]) -> None:
    w.write(f"\n# {title.upper()} Terraform Module\n")

    w.write("\n## Overview\n\n")

    w.write("\n## Input\n\n")
    markdown_table(w, inputs_table(inputs))

    w.write("\n## Output\n\n")
    markdown_table(w, outputs_table(outputs))

    w.write("\n## Usage\n")
    w.write("\n```\n\n```\n")

    w.write("\n## Troubleshooting\n\n")
