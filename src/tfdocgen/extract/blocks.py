from __future__ import annotations

import logging
from typing import Any, Iterator, List, Mapping, Tuple

from .models import ModuleVar
from ..errors import ExtractionError
from ..utils import as_bool, as_text, as_type_text

logger = logging.getLogger(__name__)

_PLURAL = {"variable": "variables", "output": "outputs"}


def _labelled_bodies(blocks: Any) -> Iterator[Tuple[str, Mapping[str, Any]]]:
    # HCL1:        [ {name: [ {fields} ]} ]
    # python-hcl2: [ {name: {fields}} ]
    # JSON syntax:   {name: {fields}}
    if isinstance(blocks, Mapping):
        blocks = [blocks]
    if not isinstance(blocks, list):
        raise ExtractionError(f"Expected a list of blocks, got {type(blocks).__name__}")

    for labels in blocks:
        if not isinstance(labels, Mapping):
            raise ExtractionError(f"Expected a labelled block, got {type(labels).__name__}")
        for name, bodies in labels.items():
            if isinstance(bodies, Mapping):
                bodies = [bodies]
            if not isinstance(bodies, list):
                raise ExtractionError(f"Block {name!r} has no body")
            for body in bodies:
                if not isinstance(body, Mapping):
                    raise ExtractionError(f"Block {name!r} body is a {type(body).__name__}, not a mapping")
                yield str(name), body


def _field_text(body: Mapping[str, Any], key: str) -> str:
    if key not in body:
        return ""
    return as_text(body[key])


def module_table(blocks: Any) -> List[ModuleVar]:
    """Flatten the value stored under a block type key into table rows."""
    rows: List[ModuleVar] = []
    for name, body in _labelled_bodies(blocks):
        rows.append(
            ModuleVar(
                name=name,
                description=_field_text(body, "description"),
                var_type=as_type_text(body["type"]) if "type" in body else "",
                default=_field_text(body, "default"),
                required="default" not in body,
                sensitive=as_bool(body.get("sensitive", False)),
            )
        )
    return rows


def extract_blocks(document: Any, block_type: str, *, sort_by_name: bool = False) -> List[ModuleVar]:
    if not isinstance(document, Mapping):
        raise ExtractionError(f"Expected a document mapping, got {type(document).__name__}")

    blocks = document.get(block_type)
    if not blocks:
        logger.debug("No %s detected.", _PLURAL.get(block_type, block_type + " blocks"))
        return []

    try:
        rows = module_table(blocks)
    except ExtractionError as e:
        raise ExtractionError(f"{block_type}: {e}") from e

    if sort_by_name:
        rows.sort(key=lambda r: r.name)
    logger.debug("Extracted %d %s block(s)", len(rows), block_type)
    return rows
