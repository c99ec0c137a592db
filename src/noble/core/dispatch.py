"""
Item Dispatcher.

Routes a classified item to the transformer for its `ItemKind`. The routing
table must cover every member of `ItemKind`; this is verified when the module
is imported, so adding a kind without a transformer fails immediately.
"""

import logging
from typing import Callable, Dict, Optional

from noble.compiler.ir import Item
from noble.core.annotation import Annotation
from noble.core.transformers import (
  DEFAULT_OPTIONS,
  TransformOptions,
  transform_contract,
  transform_function,
  transform_group,
  transform_record,
  transform_sum_type,
)
from noble.enums import ItemKind
from noble.errors import UnsupportedConstructError

logger = logging.getLogger(__name__)

Transformer = Callable[[Item, TransformOptions], Item]

_TRANSFORMERS: Dict[ItemKind, Transformer] = {
  ItemKind.FUNCTION: transform_function,
  ItemKind.DATA_RECORD: transform_record,
  ItemKind.OPERATION_GROUP: transform_group,
  ItemKind.SUM_TYPE: transform_sum_type,
  ItemKind.CONTRACT: transform_contract,
}

_missing = set(ItemKind) - set(_TRANSFORMERS)
if _missing:
  raise RuntimeError(f"No transformer registered for item kinds: {sorted(k.value for k in _missing)}")


def get_transformer(kind: ItemKind) -> Transformer:
  """Returns the transformer function registered for ``kind``."""
  return _TRANSFORMERS[kind]


class Dispatcher:
  """
  Selects and invokes exactly one kind transformer per item.

  The dispatcher is stateless apart from its options, so one instance can be
  shared across threads.
  """

  def __init__(self, options: Optional[TransformOptions] = None) -> None:
    self.options = options or DEFAULT_OPTIONS

  def dispatch(self, item: Item, annotation: Optional[Annotation] = None) -> Item:
    """
    Transforms one annotated item.

    Args:
        item (Item): The classified item, with the annotation already consumed.
        annotation (Optional[Annotation]): The consumed annotation.

    Returns:
        Item: The transformed item.

    Raises:
        UnsupportedConstructError: If the item is not one of the five supported kinds.
    """
    if item.KIND is None:
      raise UnsupportedConstructError(item.span, item.observed_kind, item)

    if annotation is not None and annotation.args:
      logger.debug("Ignoring annotation arguments on %s: %s", item.name, annotation.args)

    logger.debug("Dispatching %s `%s` at %s", item.KIND.value, item.name, item.span)
    return _TRANSFORMERS[item.KIND](item, self.options)
