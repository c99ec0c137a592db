"""
Tests for Item Model Data Structures.

Verifies:
1. Item kinds are fixed per class; opaque items report their own kind.
2. Field parameter naming for named and positional fields.
3. Wrapped-block detection.
4. Span formatting.
"""

from noble.compiler.ir import (
  Block,
  Contract,
  DataRecord,
  Field,
  Function,
  Method,
  OpaqueItem,
  OperationGroup,
  Param,
  RawStmt,
  Span,
  SumType,
  UnsafeBlock,
  is_wrapped,
)
from noble.enums import ItemKind


def test_item_kinds():
  """Each supported class maps to exactly one kind."""
  assert Function(name="f").KIND == ItemKind.FUNCTION
  assert DataRecord(name="S").KIND == ItemKind.DATA_RECORD
  assert OperationGroup(name="S").KIND == ItemKind.OPERATION_GROUP
  assert SumType(name="E").KIND == ItemKind.SUM_TYPE
  assert Contract(name="T").KIND == ItemKind.CONTRACT


def test_observed_kind():
  assert Function(name="f").observed_kind == "fn"
  opaque = OpaqueItem(name="m", kind="mod")
  assert opaque.KIND is None
  assert opaque.observed_kind == "mod"


def test_field_param_name():
  assert Field("i32", "a", 0).param_name == "a"
  assert Field("u8", index=3).param_name == "field_3"


def test_receiver_param():
  assert Param("&self").is_receiver
  assert not Param("x", "u8").is_receiver


def test_is_wrapped():
  assert is_wrapped(Block([UnsafeBlock(Block([RawStmt("x")]))]))
  assert not is_wrapped(Block([RawStmt("x")]))
  assert not is_wrapped(Block([UnsafeBlock(), RawStmt("x")]))
  assert not is_wrapped(Block())
  assert not is_wrapped(None)


def test_required_method():
  assert Method(name="m").is_required
  assert not Method(name="m", body=Block()).is_required


def test_span_str():
  assert str(Span("src/lib.rs", 12, 4)) == "src/lib.rs:12:4"
  assert str(Span()) == "<unknown>:0:0"
