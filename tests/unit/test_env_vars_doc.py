from __future__ import annotations

import importlib.util
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def _load_tool():
    spec = importlib.util.spec_from_file_location("generate_env_vars_md", ROOT / "tools" / "generate_env_vars_md.py")
    mod = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(mod)
    return mod


def test_env_vars_doc_is_current(tmp_path) -> None:
    tool = _load_tool()
    out = tmp_path / "ENV_VARS.md"
    assert tool.main(["--out", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == (ROOT / "docs" / "ENV_VARS.md").read_text(encoding="utf-8")
