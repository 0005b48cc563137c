from __future__ import annotations

from typing import Dict, Optional

from .base import ParserAdapter
from ..errors import ParserAdapterError


_ADAPTERS: Dict[str, ParserAdapter] = {}
_defaults_registered = False


def register_adapter(adapter: ParserAdapter) -> None:
    """Register a declaration-file parser adapter.

    A later registration under the same name replaces the earlier one, so a
    caller can swap in its own parser for ``.tf`` files.
    """

    name = getattr(adapter, "name", None)
    if not isinstance(name, str) or not name:
        raise ParserAdapterError("Adapter must define a non-empty 'name' attribute")
    _ADAPTERS[name] = adapter


def get_adapter(name: str) -> ParserAdapter:
    _ensure_default_adapters_registered()
    try:
        return _ADAPTERS[name]
    except KeyError as e:
        raise ParserAdapterError(f"Unsupported parser: {name!r}") from e


def adapter_for_path(path: str) -> ParserAdapter:
    """Pick the adapter whose suffix matches ``path``; the longest suffix wins."""
    _ensure_default_adapters_registered()
    lowered = path.lower()
    best: Optional[ParserAdapter] = None
    best_len = 0
    for adapter in _ADAPTERS.values():
        for suffix in adapter.suffixes:
            if lowered.endswith(suffix) and len(suffix) > best_len:
                best, best_len = adapter, len(suffix)
    if best is None:
        raise ParserAdapterError(f"No parser registered for {path!r}")
    return best


def _ensure_default_adapters_registered() -> None:
    """Register built-in adapters once, without replacing caller registrations."""
    global _defaults_registered
    if _defaults_registered:
        return
    from .hcl import Hcl2Adapter
    from .tfjson import JsonAdapter

    for adapter in (Hcl2Adapter(), JsonAdapter()):
        _ADAPTERS.setdefault(adapter.name, adapter)
    _defaults_registered = True
