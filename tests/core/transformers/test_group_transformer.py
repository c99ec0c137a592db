"""
Tests for the Operation-Group Transformer.

Verifies:
1. Each method body is wrapped independently.
2. Non-method members pass through.
3. Member order, target type and signatures are unchanged.
4. Trait impls become `unsafe impl` (configurable); inherent impls do not.
"""

from noble.compiler.ir import AssocItem, Block, Method, OperationGroup, RawStmt, UnsafeBlock
from noble.core.transformers import TransformOptions, transform_group


def test_all_method_bodies_wrapped(value_impl):
  out = transform_group(value_impl)

  methods = [m for m in out.members if isinstance(m, Method)]
  originals = [m for m in value_impl.members if isinstance(m, Method)]
  assert [m.name for m in methods] == ["get_value", "dangerous_method"]

  for new, old in zip(methods, originals):
    assert len(new.body.stmts) == 1
    assert isinstance(new.body.stmts[0], UnsafeBlock)
    assert new.body.stmts[0].body.stmts == old.body.stmts
    assert new.sig == old.sig


def test_non_method_members_pass_through(value_impl):
  out = transform_group(value_impl)
  assert out.members[0] is value_impl.members[0]
  assert isinstance(out.members[0], AssocItem)


def test_binding_unchanged(value_impl):
  out = transform_group(value_impl)
  assert out.name == "Container"
  assert out.trait_ref is None
  assert out.is_unsafe is False


def test_trait_impl_marked_unsafe():
  group = OperationGroup(
    name="Buffer",
    trait_ref="Send",
    members=[Method(name="poke", body=Block([RawStmt("self.ptr.write(0)")]))],
  )
  assert transform_group(group).is_unsafe is True
  assert transform_group(group, TransformOptions(mark_trait_impls_unsafe=False)).is_unsafe is False


def test_empty_trait_impl():
  """`impl Send for T {}` has nothing to wrap but still becomes unsafe."""
  out = transform_group(OperationGroup(name="Handle", trait_ref="Send"))
  assert out.members == []
  assert out.is_unsafe
