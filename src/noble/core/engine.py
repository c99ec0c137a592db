"""
Expansion Engine.

Drives a compilation unit through the expansion pipeline:

1.  **Ingestion**: decode an item document into a `CompilationUnit`.
2.  **Annotation**: find and consume ``#[noble]`` on each item. Unannotated
    items pass through untouched.
3.  **Dispatch**: route each annotated item to its kind transformer.
    Unsupported shapes produce an error diagnostic and the item is kept as-is.
4.  **Substitution**: every result replaces the original item at the same index.
5.  **Emission**: serialize the new unit with the configured backend.

Items are independent, so step 3 may run on a thread pool; results are always
reassembled in source order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, NamedTuple, Optional, Tuple

from noble.compiler.backend import CompilerBackend
from noble.compiler.registry import get_backend_class
from noble.compiler.frontends.document import load_unit
from noble.compiler.ir import CompilationUnit, Item
from noble.config import RuntimeConfig
from noble.core.annotation import consume_annotation
from noble.core.dispatch import Dispatcher
from noble.core.expansion_result import Diagnostic, ExpansionResult
from noble.core.transformers import TransformOptions
from noble.enums import Severity
from noble.errors import DocumentError, UnsupportedConstructError

logger = logging.getLogger(__name__)


class ItemOutcome(NamedTuple):
  """Result of expanding one item."""

  item: Item
  diagnostic: Optional[Diagnostic] = None
  expanded: bool = False


class ExpansionEngine:
  """
  The main expansion driver.

  The engine holds configuration only; it keeps no per-unit state, so one
  instance can expand any number of units.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None) -> None:
    """
    Initializes the Engine.

    Args:
        config (Optional[RuntimeConfig]): Settings. Defaults are used when omitted.
    """
    self.config = config or RuntimeConfig()
    self.dispatcher = Dispatcher(
      TransformOptions(
        idempotent=self.config.idempotent,
        mark_trait_impls_unsafe=self.config.mark_trait_impls_unsafe,
        constructor_docs=self.config.constructor_docs,
      )
    )
    self.backend = self._make_backend()

  def _make_backend(self) -> CompilerBackend:
    backend_cls = get_backend_class(self.config.output_format)
    return backend_cls(indent_width=self.config.indent_width)

  def expand_item(self, item: Item) -> ItemOutcome:
    """
    Expands a single item.

    Args:
        item (Item): A classified item, possibly carrying the annotation.

    Returns:
        ItemOutcome: The replacement item plus an optional diagnostic.
    """
    stripped, annotation = consume_annotation(item, self.config.attribute)
    if annotation is None:
      return ItemOutcome(item=item)

    try:
      return ItemOutcome(item=self.dispatcher.dispatch(stripped, annotation), expanded=True)
    except UnsupportedConstructError as e:
      diagnostic = Diagnostic(span=str(e.span), kind=e.observed_kind, message=str(e), severity=Severity.ERROR)
      return ItemOutcome(item=e.item if e.item is not None else stripped, diagnostic=diagnostic)

  def expand_unit(self, unit: CompilationUnit) -> Tuple[CompilationUnit, List[Diagnostic]]:
    """
    Expands every annotated item of a unit.

    Args:
        unit (CompilationUnit): The input unit. It is not modified.

    Returns:
        Tuple[CompilationUnit, List[Diagnostic]]: The new unit (same item order)
        and the diagnostics in source order.
    """
    new_unit, outcomes = self._expand(unit)
    return new_unit, [o.diagnostic for o in outcomes if o.diagnostic is not None]

  def _expand(self, unit: CompilationUnit) -> Tuple[CompilationUnit, List[ItemOutcome]]:
    outcomes = self._map_items(unit.items)

    for o in outcomes:
      if o.diagnostic is not None:
        logger.error("%s: %s", o.diagnostic.span, o.diagnostic.message)

    logger.debug("Expanded %d of %d items in %s", sum(o.expanded for o in outcomes), len(unit.items), unit.file)
    return CompilationUnit(file=unit.file, items=[o.item for o in outcomes]), outcomes

  def _map_items(self, items: List[Item]) -> List[ItemOutcome]:
    if self.config.max_workers <= 1 or len(items) <= 1:
      return [self.expand_item(item) for item in items]

    with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
      return list(pool.map(self.expand_item, items))

  def run(self, text: str, file_name: Optional[str] = None) -> ExpansionResult:
    """
    Expands an item document and emits it.

    Args:
        text (str): JSON item document.
        file_name (Optional[str]): Name used in spans when the document has none.

    Returns:
        ExpansionResult: Emitted code, diagnostics and status.
    """
    try:
      unit = load_unit(text, file_name)
    except DocumentError as e:
      return ExpansionResult(errors=[str(e)], success=False)

    return self.run_unit(unit)

  def run_unit(self, unit: CompilationUnit) -> ExpansionResult:
    """
    Expands and emits an already decoded unit.

    Args:
        unit (CompilationUnit): The input unit.

    Returns:
        ExpansionResult: Emitted code, diagnostics and status.
    """
    expanded_unit, outcomes = self._expand(unit)
    diagnostics = [o.diagnostic for o in outcomes if o.diagnostic is not None]
    errors = [str(d) for d in diagnostics if d.severity == Severity.ERROR]
    expanded = sum(1 for o in outcomes if o.expanded)

    return ExpansionResult(
      code=self.backend.compile(expanded_unit),
      errors=errors,
      diagnostics=diagnostics,
      expanded=expanded,
      success=not (self.config.strict_mode and errors),
    )
