"""Render the README of the bundled example module to stdout.

Usage:
  python examples/render_readme.py
"""

from __future__ import annotations

import logging
from pathlib import Path

from tfdocgen import generate
from tfdocgen.config.settings import Settings

logging.basicConfig(level=logging.DEBUG)

MODULE_DIR = Path(__file__).resolve().parent / "basic"

summary = generate(
    Settings(
        variables_file=str(MODULE_DIR / "variables.tf"),
        outputs_file=str(MODULE_DIR / "outputs.tf"),
        title="basic",
    )
)
print(f"\n<!-- {summary.inputs} inputs, {summary.outputs} outputs -->")
