from __future__ import annotations

import json
from typing import Any

_TRUE_WORDS = {"1", "true", "t", "yes", "y", "on"}


def as_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return False
    if isinstance(v, str):
        return v.strip().lower() in _TRUE_WORDS
    return bool(v)


def as_text(v: Any) -> str:
    """Render an attribute value the way it reads in a declaration file."""
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, str):
        return v
    if isinstance(v, (int, float)):
        return str(v)
    try:
        return json.dumps(v, ensure_ascii=False, separators=(",", ":"), default=str)
    except (TypeError, ValueError):
        return str(v)


def as_type_text(v: Any) -> str:
    """Render a ``type`` constraint in HCL type syntax, e.g. ``{name = string}``."""
    if isinstance(v, str):
        return v
    if isinstance(v, dict):
        return "{" + ", ".join(f"{k} = {as_type_text(t)}" for k, t in v.items()) + "}"
    if isinstance(v, (list, tuple)):
        return "[" + ", ".join(as_type_text(t) for t in v) + "]"
    return as_text(v)
