from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class ModuleVar:
    """One declared ``variable`` or ``output`` block, flattened for a table row."""

    name: str
    description: str = ""
    var_type: str = ""
    default: str = ""
    required: bool = True  # no default declared
    sensitive: bool = False

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)
