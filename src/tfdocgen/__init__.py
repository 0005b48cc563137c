"""tfdocgen.

Public API:
    - generate(...): render a module README from its declaration files
    - load_document(...): parse a declaration file into a generic tree
    - extract_blocks(...) / module_table(...): flatten blocks into table rows
    - markdown_table(...) / render_readme(...): markdown rendering
"""

from .extract.blocks import extract_blocks, module_table
from .extract.models import ModuleVar
from .generate import Summary, generate
from .render.markdown import Align, Column, Table, markdown_table
from .render.readme import render_readme
from .source import load_document

__all__ = [
    "Align",
    "Column",
    "ModuleVar",
    "Summary",
    "Table",
    "extract_blocks",
    "generate",
    "load_document",
    "markdown_table",
    "module_table",
    "render_readme",
]
