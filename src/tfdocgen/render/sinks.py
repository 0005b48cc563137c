from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Sink(Protocol):
    def write(self, text: str) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class StdoutSink:
    def write(self, text: str) -> None:
        sys.stdout.write(text)

    def flush(self) -> None:
        sys.stdout.flush()

    def close(self) -> None:
        self.flush()


class FileSink:
    """Collects the README in memory and writes ``path`` on ``close()``."""

    def __init__(self, path: str) -> None:
        self._path = Path(path)
        self._parts: List[str] = []

    def write(self, text: str) -> None:
        self._parts.append(text)

    def flush(self) -> None:
        return None

    def discard(self) -> None:
        self._parts.clear()

    def close(self) -> None:
        if not self._parts:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text("".join(self._parts), encoding="utf-8")
        logger.debug("Wrote %s", self._path)
        self._parts.clear()
