"""
noble Package.

An attribute-driven item expander. Items annotated with ``#[noble]`` are
rewritten so that their logic runs inside ``unsafe`` regions:

- functions get their body wrapped in ``unsafe { .. }``;
- structs get a ``new_unsafe`` constructor;
- enums get one ``new_<variant>_unsafe`` constructor per variant;
- impl blocks get every method body wrapped;
- traits become ``unsafe trait`` with unsafe methods.

Items arrive as JSON item documents produced by a host parser and leave as
Rust source or as item documents.

Usage
-----

.. code-block:: python

    import noble

    doc = '{"items": [{"kind": "fn", "name": "poke", "attrs": ["#[noble]"], "body": ["*P = 1;"]}]}'
    print(noble.expand(doc))
    # fn poke() {
    #     unsafe {
    #         *P = 1;
    #     }
    # }
"""

from typing import Optional

from noble.config import RuntimeConfig
from noble.core.engine import ExpansionEngine, ExpansionResult
from noble.errors import DocumentError, NobleError, UnsupportedConstructError

__version__ = "0.2.0"


def expand(document: str, output_format: str = "rust", strict: bool = False, file_name: Optional[str] = None) -> str:
  """
  Expands every annotated item of an item document.

  Args:
      document (str): JSON item document.
      output_format (str): ``"rust"`` or ``"json"``.
      strict (bool): If True, unsupported annotated items raise instead of
          being passed through.
      file_name (Optional[str]): File name used in diagnostics.

  Returns:
      str: The emitted code.

  Raises:
      ValueError: If the document is malformed, or in strict mode when an
          annotated item cannot be expanded.
  """
  config = RuntimeConfig(output_format=output_format, strict_mode=strict)
  result = ExpansionEngine(config=config).run(document, file_name=file_name)

  if not result.success:
    raise ValueError("Expansion failed:\n" + "\n".join(result.errors))

  return result.code


__all__ = [
  "DocumentError",
  "ExpansionEngine",
  "ExpansionResult",
  "NobleError",
  "RuntimeConfig",
  "UnsupportedConstructError",
  "__version__",
  "expand",
]
