"""
Sum-Type Transformer.

Appends one ``new_<variant>_unsafe`` constructor per enum variant, in variant
declaration order. The enum definition itself is unchanged.
"""

import dataclasses
import logging
from typing import List

from noble.compiler.ir import Method, SumType
from noble.compiler.naming import constructor_name
from noble.core.transformers.base import (
  DEFAULT_OPTIONS,
  TransformOptions,
  build_constructor,
  has_operation,
)

logger = logging.getLogger(__name__)


def transform_sum_type(item: SumType, options: TransformOptions = DEFAULT_OPTIONS) -> SumType:
  """
  Generates one unsafe constructor per variant of an enum.

  Args:
      item (SumType): The annotated enum.
      options (TransformOptions): Transformation switches.

  Returns:
      SumType: The enum with the constructors appended to ``operations``.
  """
  operations: List[Method] = list(item.operations)

  for variant in item.variants:
    name = constructor_name(item.name, variant.name)
    if options.idempotent and has_operation(item.operations, name):
      logger.debug("enum %s already has %s, skipping", item.name, name)
      continue
    path = f"Self::{variant.name}"
    operations.append(build_constructor(name, path, variant.style, variant.fields, options))

  logger.debug("Generated %d constructors for enum %s", len(operations) - len(item.operations), item.name)
  return dataclasses.replace(item, variants=list(item.variants), operations=operations)
