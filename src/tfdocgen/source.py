from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from .adapters.registry import adapter_for_path, get_adapter
from .errors import SourceFileError

logger = logging.getLogger(__name__)


def load_document(path: str, *, parser: Optional[str] = None) -> Any:
    """Read ``path`` and return the generic document tree its parser produces."""
    adapter = get_adapter(parser) if parser else adapter_for_path(path)

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceFileError(f"Error reading file {path!r}: {e}") from e

    logger.debug("Parsing %s with the %s parser", path, adapter.name)
    return adapter.parse(text, source=path)
