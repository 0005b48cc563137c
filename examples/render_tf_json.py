"""Extract variables from Terraform JSON syntax and print them as a table.

Usage:
  python examples/render_tf_json.py
"""

from __future__ import annotations

import json
import sys

from tfdocgen import extract_blocks, markdown_table
from tfdocgen.adapters.registry import get_adapter
from tfdocgen.render.readme import inputs_table

doc = {
    "variable": {
        "region": {"type": "string", "default": "eu-west-1", "description": "Region to deploy into."},
        "zones": {"type": "list(string)", "description": "Availability zones | in order."},
    }
}

tree = get_adapter("json").parse(json.dumps(doc), source="<inline>")
markdown_table(sys.stdout, inputs_table(extract_blocks(tree, "variable")))
