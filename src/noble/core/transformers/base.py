"""
Shared Building Blocks for Kind Transformers.

Provides the options object every transformer accepts, plus the helpers that
wrap blocks in restricted-safety regions and synthesize constructors.
"""

import dataclasses
from dataclasses import dataclass
from typing import List, Optional

from noble.compiler.ir import (
  Block,
  Construct,
  Field,
  Method,
  Param,
  Qualifiers,
  Signature,
  UnsafeBlock,
  is_wrapped,
)
from noble.enums import FieldStyle

CONSTRUCTOR_DOC = "/// Unsafe constructor"


@dataclass(frozen=True)
class TransformOptions:
  """
  Behaviour switches for the kind transformers.

  Attributes:
      idempotent (bool): Skip wrapping blocks that already are a single
          restricted-safety region, and skip constructors that already exist
          in the item's operation set.
      mark_trait_impls_unsafe (bool): Turn ``impl Trait for T`` into ``unsafe impl``.
      constructor_docs (bool): Attach a doc comment to generated constructors.
  """

  idempotent: bool = True
  mark_trait_impls_unsafe: bool = True
  constructor_docs: bool = True


DEFAULT_OPTIONS = TransformOptions()


def wrap_block(block: Block, options: TransformOptions = DEFAULT_OPTIONS) -> Block:
  """
  Encloses a block's statements in a restricted-safety region.

  The original statements are moved, in order, into the new region. With
  ``options.idempotent`` set, a block that already consists of a single
  region is returned unchanged.

  Args:
      block (Block): The original body.
      options (TransformOptions): Transformation switches.

  Returns:
      Block: A new block ``{ unsafe { <original statements> } }``.
  """
  if options.idempotent and is_wrapped(block):
    return block
  return Block(stmts=[UnsafeBlock(body=Block(stmts=list(block.stmts)))])


def wrap_method(method: Method, options: TransformOptions = DEFAULT_OPTIONS) -> Method:
  """
  Returns a copy of a method with its body wrapped. Required methods are returned as-is.
  """
  if method.body is None:
    return method
  return dataclasses.replace(method, body=wrap_block(method.body, options))


def mark_unsafe(method: Method) -> Method:
  """
  Returns a copy of a method whose signature carries the ``unsafe`` qualifier.
  """
  qualifiers = dataclasses.replace(method.sig.qualifiers, is_unsafe=True)
  return dataclasses.replace(method, sig=dataclasses.replace(method.sig, qualifiers=qualifiers))


def params_from_fields(fields: List[Field]) -> List[Param]:
  """
  Derives constructor parameters from a field list, preserving order.

  Args:
      fields (List[Field]): Record or variant fields.

  Returns:
      List[Param]: One parameter per field, named after the field or ``field_<index>``.
  """
  return [Param(name=f.param_name, ty=f.ty) for f in fields]


def build_constructor(
  name: str,
  path: str,
  style: FieldStyle,
  fields: List[Field],
  options: TransformOptions = DEFAULT_OPTIONS,
) -> Method:
  """
  Synthesizes a ``pub unsafe fn <name>(..) -> Self`` constructor.

  The body builds the instance from the parameters inside a restricted-safety
  region, e.g. ``unsafe { Self { a, b } }``.

  Args:
      name (str): Constructor identifier.
      path (str): Construction path (``Self`` or ``Self::Variant``).
      style (FieldStyle): Shape of the field list.
      fields (List[Field]): Fields to populate, in declared order.
      options (TransformOptions): Transformation switches.

  Returns:
      Method: The generated constructor.
  """
  params = params_from_fields(fields)
  construct = Construct(
    path=path,
    style=style,
    fields=[f.name for f in fields if f.name is not None] if style == FieldStyle.NAMED else [],
    args=[p.name for p in params],
  )
  return Method(
    name=name,
    vis="pub",
    attrs=[CONSTRUCTOR_DOC] if options.constructor_docs else [],
    sig=Signature(params=params, ret="Self", qualifiers=Qualifiers(is_unsafe=True)),
    body=Block(stmts=[UnsafeBlock(body=Block(stmts=[construct]))]),
  )


def has_operation(operations: List[Method], name: str) -> bool:
  """Checks whether an operation named ``name`` is already present."""
  return any(op.name == name for op in operations)


def append_constructor(
  operations: List[Method], constructor: Method, options: TransformOptions = DEFAULT_OPTIONS
) -> Optional[List[Method]]:
  """
  Appends a constructor to a copy of an operation set.

  Returns:
      Optional[List[Method]]: The new operation list, or None when idempotent
      mode finds an operation of the same name already present.
  """
  if options.idempotent and has_operation(operations, constructor.name):
    return None
  return [*operations, constructor]
