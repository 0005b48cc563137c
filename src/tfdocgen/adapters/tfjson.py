from __future__ import annotations

import json
from typing import Any

from .base import ParserAdapter
from ..errors import ParseError


class JsonAdapter(ParserAdapter):
    """Parser adapter for Terraform's JSON syntax (``*.tf.json``)."""

    name = "json"
    suffixes = (".tf.json", ".json")

    def parse(self, text: str, *, source: str) -> Any:
        try:
            return json.loads(text)
        except ValueError as e:
            raise ParseError(str(e), source=source) from e
