"""
Data-Record Transformer.

The struct definition is kept as-is and a ``new_unsafe`` constructor taking
every field (in declaration order) is appended to its operation set.
"""

import dataclasses
import logging

from noble.compiler.ir import DataRecord
from noble.compiler.naming import constructor_name
from noble.core.transformers.base import (
  DEFAULT_OPTIONS,
  TransformOptions,
  append_constructor,
  build_constructor,
)

logger = logging.getLogger(__name__)


def transform_record(item: DataRecord, options: TransformOptions = DEFAULT_OPTIONS) -> DataRecord:
  """
  Generates the unsafe constructor for a struct.

  Named structs get ``new_unsafe(a: A, b: B)`` building ``Self { a, b }``,
  tuple structs get ``new_unsafe(field_0: A)`` building ``Self(field_0)`` and
  unit structs get a parameterless ``new_unsafe()`` returning ``Self``.

  Args:
      item (DataRecord): The annotated struct.
      options (TransformOptions): Transformation switches.

  Returns:
      DataRecord: The struct with the constructor appended to ``operations``.
  """
  name = constructor_name(item.name)
  ctor = build_constructor(name, "Self", item.style, item.fields, options)

  operations = append_constructor(item.operations, ctor, options)
  if operations is None:
    logger.debug("struct %s already has %s, skipping", item.name, name)
    return item

  logger.debug("Generated %s for struct %s with %d parameters", name, item.name, len(ctor.sig.params))
  return dataclasses.replace(item, fields=list(item.fields), operations=operations)
