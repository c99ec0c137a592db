"""
Kind Transformers.

One pure function per supported item kind. Each takes an item and optional
`TransformOptions` and returns a new item; inputs are never mutated.
"""

from noble.core.transformers.base import DEFAULT_OPTIONS, TransformOptions
from noble.core.transformers.contract import transform_contract
from noble.core.transformers.function import transform_function
from noble.core.transformers.group import transform_group
from noble.core.transformers.record import transform_record
from noble.core.transformers.sum_type import transform_sum_type

__all__ = [
  "DEFAULT_OPTIONS",
  "TransformOptions",
  "transform_contract",
  "transform_function",
  "transform_group",
  "transform_record",
  "transform_sum_type",
]
