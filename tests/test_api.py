"""
Tests for the top-level `noble.expand` helper and result models.
"""

import json

import pytest

import noble
from noble.core.expansion_result import Diagnostic, ExpansionResult
from noble.enums import Severity

DOC = json.dumps({"items": [{"kind": "fn", "name": "poke", "attrs": ["#[noble]"], "body": ["*P = 1;"]}]})
BAD = json.dumps({"items": [{"kind": "const", "name": "C", "attrs": ["#[noble]"], "text": "const C: u8 = 1;"}]})


def test_expand_rust():
  assert noble.expand(DOC) == "fn poke() {\n    unsafe {\n        *P = 1;\n    }\n}\n"


def test_expand_json():
  data = json.loads(noble.expand(DOC, output_format="json"))
  assert data["items"][0]["body"] == [{"unsafe": ["*P = 1;"]}]


def test_expand_lenient_passes_unsupported_through():
  assert noble.expand(BAD) == "const C: u8 = 1;\n"


def test_expand_strict_raises():
  with pytest.raises(ValueError, match="cannot be applied to `const` items"):
    noble.expand(BAD, strict=True, file_name="lib.rs")


def test_expand_malformed_document():
  with pytest.raises(ValueError, match="Expansion failed"):
    noble.expand("{}{")


def test_diagnostic_str():
  d = Diagnostic(span="a.rs:1:0", kind="mod", message="a.rs:1:0: nope")
  assert str(d) == "error: a.rs:1:0: nope"
  assert d.severity == Severity.ERROR


def test_result_has_errors():
  assert not ExpansionResult().has_errors
  assert ExpansionResult(errors=["x"]).has_errors
