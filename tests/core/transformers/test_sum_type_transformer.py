"""
Tests for the Sum-Type Transformer.

Verifies:
1. One constructor per variant, in declaration order.
2. Deterministic names and per-shape parameter lists.
3. Bodies construct the variant inside an unsafe region.
"""

import copy

from noble.compiler.ir import Construct, SumType, UnsafeBlock, Variant
from noble.core.transformers import TransformOptions, transform_sum_type
from noble.enums import FieldStyle


def test_one_constructor_per_variant(shape_enum):
  out = transform_sum_type(shape_enum)
  assert len(out.operations) == len(shape_enum.variants) == 3
  assert [m.name for m in out.operations] == ["new_unit_unsafe", "new_tuple_unsafe", "new_struct_unsafe"]


def test_parameter_shapes(shape_enum):
  unit, tup, named = transform_sum_type(shape_enum).operations

  assert unit.sig.params == []
  assert [(p.name, p.ty) for p in tup.sig.params] == [("field_0", "i32"), ("field_1", "String")]
  assert [(p.name, p.ty) for p in named.sig.params] == [("field", "i32")]


def test_bodies_construct_variant(shape_enum):
  unit, tup, named = transform_sum_type(shape_enum).operations

  for ctor in (unit, tup, named):
    assert isinstance(ctor.body.stmts[0], UnsafeBlock)
    assert ctor.sig.qualifiers.is_unsafe
    assert ctor.sig.ret == "Self"

  assert unit.body.stmts[0].body.stmts[0] == Construct("Self::Unit", FieldStyle.UNIT)
  assert tup.body.stmts[0].body.stmts[0] == Construct(
    "Self::Tuple", FieldStyle.POSITIONAL, [], ["field_0", "field_1"]
  )
  assert named.body.stmts[0].body.stmts[0] == Construct("Self::Struct", FieldStyle.NAMED, ["field"], ["field"])


def test_enum_definition_untouched(shape_enum):
  before = copy.deepcopy(shape_enum)
  out = transform_sum_type(shape_enum)
  assert out.variants == before.variants
  assert shape_enum == before


def test_mixed_case_and_raw_variant_names():
  enum = SumType(name="Token", variants=[Variant("EndOfFile"), Variant("r#Type")])
  names = [m.name for m in transform_sum_type(enum).operations]
  assert names == ["new_endoffile_unsafe", "new_type_unsafe"]


def test_reapply_is_idempotent(shape_enum):
  once = transform_sum_type(shape_enum)
  assert len(transform_sum_type(once).operations) == 3
  assert len(transform_sum_type(once, TransformOptions(idempotent=False)).operations) == 6


def test_variants_with_same_lowercase_name_each_get_a_constructor():
  """Clashing names are emitted as-is and left to the compiler to report."""
  enum = SumType(name="Level", variants=[Variant("Foo"), Variant("FOO")])
  out = transform_sum_type(enum)

  assert [m.name for m in out.operations] == ["new_foo_unsafe", "new_foo_unsafe"]
  assert [c.body.stmts[0].body.stmts[0].path for c in out.operations] == ["Self::Foo", "Self::FOO"]
