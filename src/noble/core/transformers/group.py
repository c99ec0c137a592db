"""
Operation-Group Transformer.

Every method body of an impl block is wrapped independently. Associated
consts, types and macro members pass through verbatim.
"""

import dataclasses
import logging

from noble.compiler.ir import Method, OperationGroup
from noble.core.transformers.base import DEFAULT_OPTIONS, TransformOptions, wrap_method

logger = logging.getLogger(__name__)


def transform_group(item: OperationGroup, options: TransformOptions = DEFAULT_OPTIONS) -> OperationGroup:
  """
  Wraps each method body of an impl block in a restricted-safety region.

  For trait implementations (``impl Trait for Type``) the block itself is
  additionally marked ``unsafe impl`` when ``options.mark_trait_impls_unsafe``
  is set. Inherent impls keep their header untouched.

  Args:
      item (OperationGroup): The annotated impl block.
      options (TransformOptions): Transformation switches.

  Returns:
      OperationGroup: A new impl block with the same member order.
  """
  members = [wrap_method(m, options) if isinstance(m, Method) else m for m in item.members]

  is_unsafe = item.is_unsafe
  if item.trait_ref is not None and options.mark_trait_impls_unsafe:
    is_unsafe = True

  logger.debug(
    "Wrapped %d methods of impl %s",
    sum(1 for m in item.members if isinstance(m, Method)),
    item.name,
  )
  return dataclasses.replace(item, members=members, is_unsafe=is_unsafe)
