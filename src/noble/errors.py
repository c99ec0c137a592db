"""
Exception hierarchy for noble.

The expansion core raises exactly one error kind, `UnsupportedConstructError`.
`DocumentError` belongs to the front end and signals a malformed item document.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
  from noble.compiler.ir import Span


class NobleError(Exception):
  """Base class for all noble errors."""


class UnsupportedConstructError(NobleError):
  """
  Raised when an annotated item is not a function, struct, impl, enum or trait.

  The error is item-scoped: the caller emits ``item`` unchanged and keeps
  processing the rest of the compilation unit.

  Attributes:
      span (Span): Source location of the offending item.
      observed_kind (str): The item shape that was found (e.g. ``"type"``).
      item (Any): The original item, kept so it can be re-emitted verbatim.
  """

  def __init__(self, span: "Span", observed_kind: str, item: Optional[Any] = None) -> None:
    self.span = span
    self.observed_kind = observed_kind
    self.item = item
    super().__init__(f"{span}: #[noble] cannot be applied to `{observed_kind}` items")


class DocumentError(NobleError):
  """
  Raised when an item document cannot be decoded into the item model.

  Attributes:
      location (str): Human readable pointer into the document (e.g. ``items[3]``).
  """

  def __init__(self, message: str, location: str = "") -> None:
    self.location = location
    prefix = f"{location}: " if location else ""
    super().__init__(f"{prefix}{message}")
