"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Sample items covering every supported kind plus an unsupported one.
- Console capture for CLI and logging assertions.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'noble' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from noble.compiler.ir import (  # noqa: E402
  AssocItem,
  Block,
  Contract,
  DataRecord,
  Field,
  Function,
  GenericParam,
  Generics,
  Method,
  OpaqueItem,
  OperationGroup,
  Param,
  RawStmt,
  Signature,
  Span,
  SumType,
  Variant,
)
from noble.enums import FieldStyle, GenericKind  # noqa: E402
from noble.utils.console import NOBLE_THEME, reset_console, set_console  # noqa: E402


@pytest.fixture
def simple_fn() -> Function:
  """``pub fn add(a: i32, b: i32) -> i32 { let c = a + b; c }``"""
  return Function(
    name="add",
    vis="pub",
    attrs=["#[inline]"],
    sig=Signature(params=[Param("a", "i32"), Param("b", "i32")], ret="i32"),
    body=Block([RawStmt("let c = a + b;"), RawStmt("c")]),
    span=Span("src/lib.rs", 3, 0),
  )


@pytest.fixture
def point_record() -> DataRecord:
  """``struct Point { a: i32, b: String }``"""
  return DataRecord(
    name="Point",
    vis="pub",
    attrs=["#[derive(Debug)]"],
    style=FieldStyle.NAMED,
    fields=[Field("i32", "a", 0, vis="pub"), Field("String", "b", 1)],
  )


@pytest.fixture
def tuple_record() -> DataRecord:
  """``struct Pair(u8, u16);``"""
  return DataRecord(name="Pair", style=FieldStyle.POSITIONAL, fields=[Field("u8", index=0), Field("u16", index=1)])


@pytest.fixture
def unit_record() -> DataRecord:
  """``struct Marker;``"""
  return DataRecord(name="Marker", style=FieldStyle.UNIT)


@pytest.fixture
def generic_record() -> DataRecord:
  """``struct Holder<'a, T: Clone = u8> where T: Default { value: &'a T }``"""
  return DataRecord(
    name="Holder",
    generics=Generics(
      params=[GenericParam("'a", kind=GenericKind.LIFETIME), GenericParam("T", bounds=["Clone"], default="u8")],
      where_clauses=["T: Default"],
    ),
    style=FieldStyle.NAMED,
    fields=[Field("&'a T", "value", 0)],
  )


@pytest.fixture
def shape_enum() -> SumType:
  """``enum Shape { Unit, Tuple(i32, String), Struct { field: i32 } }``"""
  return SumType(
    name="Shape",
    vis="pub",
    variants=[
      Variant("Unit"),
      Variant("Tuple", FieldStyle.POSITIONAL, [Field("i32", index=0), Field("String", index=1)]),
      Variant("Struct", FieldStyle.NAMED, [Field("i32", "field", 0)]),
    ],
  )


@pytest.fixture
def value_impl() -> OperationGroup:
  """``impl Container { const LIMIT; fn get_value(&self) -> i32; fn dangerous_method(&mut self, p: *mut i32) }``"""
  return OperationGroup(
    name="Container",
    members=[
      AssocItem("const LIMIT: usize = 8;", kind="const"),
      Method(
        name="get_value",
        vis="pub",
        sig=Signature(params=[Param("&self")], ret="i32"),
        body=Block([RawStmt("self.value")]),
      ),
      Method(
        name="dangerous_method",
        sig=Signature(params=[Param("&mut self"), Param("p", "*mut i32")]),
        body=Block([RawStmt("*p = self.value;"), RawStmt("self.value += 1;")]),
      ),
    ],
  )


@pytest.fixture
def risky_trait() -> Contract:
  """``trait Risky { fn risky_method(&self); fn default_risky(&self) { .. } }``"""
  return Contract(
    name="Risky",
    vis="pub",
    supertraits=["Send"],
    members=[
      AssocItem("type Output;", kind="type"),
      Method(name="risky_method", sig=Signature(params=[Param("&self")])),
      Method(
        name="default_risky",
        sig=Signature(params=[Param("&self")], ret="i32"),
        body=Block([RawStmt("self.risky_method();"), RawStmt("42")]),
      ),
    ],
  )


@pytest.fixture
def type_alias() -> OpaqueItem:
  """``type Alias = i32;``"""
  return OpaqueItem(name="Alias", kind="type", text="type Alias = i32;", span=Span("src/lib.rs", 10, 0))


@pytest.fixture
def captured_console():
  """Redirects console and logging output into a recording Console."""
  recorder = Console(file=io.StringIO(), record=True, width=200, force_terminal=False, theme=NOBLE_THEME)
  set_console(recorder)
  yield recorder
  reset_console()
