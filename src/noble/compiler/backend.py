"""
Compiler Backend Protocol.

Defines the abstract interface for backends that consume an expanded
compilation unit and serialize it (Rust source, item documents).
"""

from abc import ABC, abstractmethod
from typing import Any

from noble.compiler.ir import CompilationUnit


class CompilerBackend(ABC):
  """
  Abstract base class for emission backends.

  Backends registered in `noble.compiler.registry` are constructed with a
  single ``indent_width`` keyword argument.
  """

  @abstractmethod
  def compile(self, unit: CompilationUnit) -> Any:
    """
    Serializes a compilation unit into a target artifact.

    Args:
        unit (CompilationUnit): The items to emit, in source order.

    Returns:
        Any: The emitted output (usually source text).
    """
    pass
