from __future__ import annotations

import json
import re
import textwrap
from typing import Any

from .base import ParserAdapter
from ..errors import ParseError, ParserAdapterError

_HEREDOC = re.compile(r"\A<<(-?)([A-Za-z_][A-Za-z0-9_]*)\r?\n(.*?)^[ \t]*\2[ \t]*(?:\r?\n)?\Z", re.DOTALL | re.MULTILINE)

# python-hcl2 4.x renders nested type expressions as a Python dict repr:
#   object({'name': '${string}'})
_REPR_KEY = re.compile(r"'([A-Za-z_][A-Za-z0-9_-]*)': ")
_REPR_EXPR = re.compile(r"'\$\{([^']*)\}'")


def _unquote(s: str) -> str:
    if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        try:
            v = json.loads(s)
        except ValueError:
            return s[1:-1]
        return v if isinstance(v, str) else s[1:-1]
    return s


def _heredoc(s: str) -> str:
    m = _HEREDOC.match(s)
    if m is None:
        return s
    body = m.group(3)
    if m.group(1):
        body = textwrap.dedent(body)
    return body.rstrip("\r\n")


def _type_expr(s: str) -> str:
    while "{'" in s or "'${" in s:
        fixed = _REPR_EXPR.sub(r"\1", _REPR_KEY.sub(r"\1 = ", s))
        if fixed == s:
            break
        s = fixed
    return s


def _plain(s: str) -> str:
    if s.startswith("${") and s.endswith("}"):
        return _type_expr(s[2:-1])
    return _heredoc(_unquote(s))


def normalize(value: Any) -> Any:
    """Turn python-hcl2 value conventions into plain values.

    Expressions come back wrapped as ``${...}``; newer releases also keep the
    quotes around literal strings and add ``__dunder__`` bookkeeping keys.
    Heredoc strings keep their ``<<EOT`` markers and are unwrapped here.
    """
    if isinstance(value, dict):
        return {
            _unquote(str(k)): normalize(v)
            for k, v in value.items()
            if not (str(k).startswith("__") and str(k).endswith("__"))
        }
    if isinstance(value, list):
        return [normalize(v) for v in value]
    if isinstance(value, str):
        return _plain(value)
    return value


class Hcl2Adapter(ParserAdapter):
    """Parser adapter backed by the python-hcl2 distribution."""

    name = "hcl2"
    suffixes = (".tf", ".hcl")

    def parse(self, text: str, *, source: str) -> Any:
        try:
            import hcl2  # type: ignore
        except Exception as e:
            raise ParserAdapterError("python-hcl2 is not installed. Install it with `pip install python-hcl2`.") from e

        try:
            doc = hcl2.loads(text)
        except Exception as e:
            raise ParseError(str(e).strip() or type(e).__name__, source=source) from e
        return normalize(doc)
