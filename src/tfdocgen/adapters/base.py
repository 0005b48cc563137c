from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class ParserAdapter(Protocol):
    name: str
    suffixes: Tuple[str, ...]

    def parse(self, text: str, *, source: str) -> Any: ...
