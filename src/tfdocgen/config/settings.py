from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import List, Optional

from ..utils import as_bool


def _env(name: str) -> Optional[str]:
    v = os.getenv(name)
    return v if v not in (None, "") else None


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name)
    if v is None:
        return default
    return as_bool(v)


@dataclass(frozen=True)
class EnvSpec:
    env: str
    field: str
    kind: str  # "opt_str" | "str" | "bool"


def _coerce_env(spec: EnvSpec, *, default: object) -> object:
    if spec.kind in ("opt_str", "str"):
        v = _env(spec.env)
        return default if v is None else v.strip()
    if spec.kind == "bool":
        return _env_bool(spec.env, bool(default))
    return default


@dataclass(frozen=True)
class Settings:
    """Static configuration loaded from environment (once)."""

    # Sources
    variables_file: str = "variables.tf"
    outputs_file: str = "outputs.tf"
    parser: Optional[str] = None  # adapter name; chosen by file suffix when unset

    # Rendering
    output_file: Optional[str] = None  # stdout when unset
    title: Optional[str] = None  # base name of the working directory when unset
    sort_by_name: bool = False

    verbose: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        base = cls()
        overrides: dict[str, object] = {}
        for spec in ENV_SPECS:
            overrides[spec.field] = _coerce_env(spec, default=getattr(base, spec.field))
        return replace(base, **overrides)

    def resolved_title(self) -> str:
        if self.title:
            return self.title
        return os.path.basename(os.path.abspath(os.getcwd()))


ENV_SPECS: List[EnvSpec] = [
    # Sources
    EnvSpec("TFDOCGEN_VARIABLES_FILE", "variables_file", "str"),
    EnvSpec("TFDOCGEN_OUTPUTS_FILE", "outputs_file", "str"),
    EnvSpec("TFDOCGEN_PARSER", "parser", "opt_str"),

    # Rendering
    EnvSpec("TFDOCGEN_OUTPUT_FILE", "output_file", "opt_str"),
    EnvSpec("TFDOCGEN_TITLE", "title", "opt_str"),
    EnvSpec("TFDOCGEN_SORT_BY_NAME", "sort_by_name", "bool"),

    # Generic
    EnvSpec("TFDOCGEN_VERBOSE", "verbose", "bool"),
]
