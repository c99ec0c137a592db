"""
Contract Transformer.

``trait T { .. }`` becomes ``unsafe trait T { .. }``: every method signature is
qualified ``unsafe`` and every provided (default) body is wrapped.
"""

import dataclasses

from noble.compiler.ir import Contract, Method
from noble.core.transformers.base import DEFAULT_OPTIONS, TransformOptions, mark_unsafe, wrap_method


def transform_contract(item: Contract, options: TransformOptions = DEFAULT_OPTIONS) -> Contract:
  """
  Marks a trait and all of its methods as unsafe.

  Args:
      item (Contract): The annotated trait.
      options (TransformOptions): Transformation switches.

  Returns:
      Contract: The unsafe trait, members in original order.
  """
  members = [wrap_method(mark_unsafe(m), options) if isinstance(m, Method) else m for m in item.members]
  return dataclasses.replace(item, members=members, is_unsafe=True)
