#!/usr/bin/env python3
"""Generate docs/ENV_VARS.md from tfdocgen.config.settings.

Usage:
    python tools/generate_env_vars_md.py
    python tools/generate_env_vars_md.py --out /tmp/ENV_VARS.md
"""

from __future__ import annotations

import argparse
import io
from pathlib import Path
from typing import List, Optional

from tfdocgen.config.settings import ENV_SPECS, Settings
from tfdocgen.render.markdown import Align, Column, Table, markdown_table

DEFAULT_OUT = Path(__file__).resolve().parents[1] / "docs" / "ENV_VARS.md"


def render() -> str:
    base = Settings()
    table = Table(
        columns=[
            Column("Env var", mapping=lambda v: f"`{v}`"),
            Column("Field", mapping=lambda v: f"`{v}`"),
            Column("Type", Align.CENTER, mapping=lambda v: f"`{v}`"),
            Column("Default", Align.CENTER, mapping=lambda v: f"`{v}`" if v else ""),
        ],
    )
    for spec in ENV_SPECS:
        default = getattr(base, spec.field)
        table.rows.append([spec.env, spec.field, spec.kind, "" if default is None else str(default)])

    buf = io.StringIO()
    buf.write("# Environment variables\n\n")
    buf.write("This file is generated from `Settings` + `ENV_SPECS`.\n\n")
    markdown_table(buf, table)
    return buf.getvalue()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", default=str(DEFAULT_OUT))
    args = ap.parse_args(argv)

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render(), encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
