from __future__ import annotations

import logging

import pytest

from tfdocgen.errors import ExtractionError
from tfdocgen.extract.blocks import extract_blocks, module_table
from tfdocgen.extract.models import ModuleVar


def test_hcl1_shape() -> None:
    blocks = [
        {"region": [{"description": "Region.", "type": "string", "default": "eu-west-1"}]},
        {"name": [{"description": "Name.", "type": "string"}]},
    ]
    assert module_table(blocks) == [
        ModuleVar(name="region", description="Region.", var_type="string", default="eu-west-1", required=False),
        ModuleVar(name="name", description="Name.", var_type="string", default="", required=True),
    ]


def test_hcl2_shape_keeps_document_order() -> None:
    blocks = [{"b": {"type": "number"}}, {"a": {"type": "bool"}}]
    assert [r.name for r in module_table(blocks)] == ["b", "a"]


def test_json_syntax_shape() -> None:
    blocks = {"zones": {"type": "list(string)", "default": ["a", "b"]}, "flag": {"default": False}}
    rows = module_table(blocks)
    assert rows[0].default == '["a","b"]'
    assert rows[1].default == "false"
    assert rows[1].var_type == ""


def test_default_rendering_and_required() -> None:
    rows = module_table([{"n": {"default": 2}}, {"m": {"default": {}}}, {"z": {"default": None}}])
    assert [(r.default, r.required) for r in rows] == [("2", False), ("{}", False), ("null", False)]


def test_sensitive_flag() -> None:
    rows = module_table([{"a": {"sensitive": True}}, {"b": {"sensitive": "true"}}, {"c": {"value": "x"}}])
    assert [r.sensitive for r in rows] == [True, True, False]


def test_unknown_fields_are_ignored() -> None:
    rows = module_table([{"a": {"nullable": False, "validation": [{"condition": "x"}], "description": "A."}}])
    assert rows == [ModuleVar(name="a", description="A.")]


def test_missing_block_type_is_empty(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="tfdocgen.extract.blocks"):
        assert extract_blocks({"output": []}, "variable") == []
    assert "No variables detected." in caplog.text


def test_empty_block_list_logs_like_a_missing_one(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="tfdocgen.extract.blocks"):
        assert extract_blocks({"variable": []}, "variable") == []
    assert "No variables detected." in caplog.text


def test_sort_by_name() -> None:
    doc = {"output": [{"b": {}}, {"a": {}}]}
    assert [r.name for r in extract_blocks(doc, "output", sort_by_name=True)] == ["a", "b"]


@pytest.mark.parametrize(
    "doc",
    [
        ["not", "a", "mapping"],
        {"variable": "oops"},
        {"variable": [["x"]]},
        {"variable": [{"a": "no body"}]},
        {"variable": [{"a": [1]}]},
    ],
)
def test_malformed_documents(doc) -> None:
    with pytest.raises(ExtractionError):
        extract_blocks(doc, "variable")
