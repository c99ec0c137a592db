"""
Tests for the Data-Record Transformer.

Verifies:
1. Named records: parameters named after fields, in order.
2. Positional records: ``field_<index>`` parameters.
3. Unit records: zero parameters.
4. Field list untouched; constructor appended to operations.
5. Idempotent handling of an existing ``new_unsafe``.
"""

import copy

from noble.compiler.ir import Construct, UnsafeBlock
from noble.core.transformers import TransformOptions, transform_record
from noble.enums import FieldStyle


def _ctor(record):
  assert len(record.operations) == 1
  return record.operations[0]


def test_named_record_constructor(point_record):
  out = transform_record(point_record)
  ctor = _ctor(out)

  assert ctor.name == "new_unsafe"
  assert ctor.vis == "pub"
  assert ctor.sig.qualifiers.is_unsafe
  assert ctor.sig.ret == "Self"
  assert [(p.name, p.ty) for p in ctor.sig.params] == [("a", "i32"), ("b", "String")]


def test_named_record_body_builds_instance(point_record):
  """Body is `unsafe { Self { a, b } }`."""
  ctor = _ctor(transform_record(point_record))

  region = ctor.body.stmts[0]
  assert isinstance(region, UnsafeBlock)
  construct = region.body.stmts[0]
  assert isinstance(construct, Construct)
  assert construct.path == "Self"
  assert construct.style == FieldStyle.NAMED
  assert construct.fields == ["a", "b"]
  assert construct.args == [p.name for p in ctor.sig.params]


def test_positional_record_constructor(tuple_record):
  ctor = _ctor(transform_record(tuple_record))

  assert [(p.name, p.ty) for p in ctor.sig.params] == [("field_0", "u8"), ("field_1", "u16")]
  construct = ctor.body.stmts[0].body.stmts[0]
  assert construct.style == FieldStyle.POSITIONAL
  assert construct.fields == []
  assert construct.args == ["field_0", "field_1"]


def test_unit_record_constructor(unit_record):
  ctor = _ctor(transform_record(unit_record))

  assert ctor.sig.params == []
  construct = ctor.body.stmts[0].body.stmts[0]
  assert construct == Construct(path="Self", style=FieldStyle.UNIT)


def test_record_definition_untouched(point_record):
  before = copy.deepcopy(point_record)
  out = transform_record(point_record)

  assert out.fields == before.fields
  assert out.attrs == before.attrs
  assert out.style == before.style
  assert point_record == before


def test_constructor_doc_toggle(point_record):
  assert _ctor(transform_record(point_record)).attrs == ["/// Unsafe constructor"]
  assert _ctor(transform_record(point_record, TransformOptions(constructor_docs=False))).attrs == []


def test_existing_constructor_skipped_when_idempotent(point_record):
  once = transform_record(point_record)
  twice = transform_record(once)
  assert [m.name for m in twice.operations] == ["new_unsafe"]


def test_existing_constructor_duplicated_when_not_idempotent(point_record):
  opts = TransformOptions(idempotent=False)
  twice = transform_record(transform_record(point_record, opts), opts)
  assert [m.name for m in twice.operations] == ["new_unsafe", "new_unsafe"]
