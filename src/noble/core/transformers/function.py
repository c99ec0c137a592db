"""
Function Transformer.

``fn f() { body }`` becomes ``fn f() { unsafe { body } }``. The signature is
copied unchanged; only the body moves into a restricted-safety region.
"""

import dataclasses
import logging

from noble.compiler.ir import Function
from noble.core.transformers.base import DEFAULT_OPTIONS, TransformOptions, wrap_block

logger = logging.getLogger(__name__)


def transform_function(item: Function, options: TransformOptions = DEFAULT_OPTIONS) -> Function:
  """
  Wraps a free function's body in a restricted-safety region.

  Args:
      item (Function): The annotated function.
      options (TransformOptions): Transformation switches.

  Returns:
      Function: A new function with the wrapped body.
  """
  logger.debug("Wrapping body of fn %s (%d statements)", item.name, len(item.body.stmts))
  return dataclasses.replace(item, body=wrap_block(item.body, options))
