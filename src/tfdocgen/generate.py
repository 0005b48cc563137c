from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config.settings import Settings
from .extract.blocks import extract_blocks
from .render.readme import render_readme
from .render.sinks import Sink, StdoutSink
from .source import load_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Summary:
    inputs: int
    outputs: int


def generate(settings: Optional[Settings] = None, sink: Optional[Sink] = None) -> Summary:
    """Read both declaration files and render the module README into ``sink``.

    Stops at the first error; nothing is rendered until both files have been
    read and extracted.
    """
    settings = settings or Settings.from_env()
    sink = sink or StdoutSink()

    variables = load_document(settings.variables_file, parser=settings.parser)
    inputs = extract_blocks(variables, "variable", sort_by_name=settings.sort_by_name)

    outputs_doc = load_document(settings.outputs_file, parser=settings.parser)
    outputs = extract_blocks(outputs_doc, "output", sort_by_name=settings.sort_by_name)

    render_readme(sink, title=settings.resolved_title(), inputs=inputs, outputs=outputs)
    sink.flush()

    logger.debug("Rendered %d input(s) and %d output(s)", len(inputs), len(outputs))
    return Summary(inputs=len(inputs), outputs=len(outputs))
