"""
Compiler Package.

Defines the item model (IR), the item-document frontend and the emission
backends. The expansion logic that rewrites items lives in `noble.core`.
"""

from noble.compiler.backend import CompilerBackend
from noble.compiler.ir import (
  CompilationUnit,
  Contract,
  DataRecord,
  Function,
  Item,
  OpaqueItem,
  OperationGroup,
  SumType,
)

__all__ = [
  "CompilationUnit",
  "CompilerBackend",
  "Contract",
  "DataRecord",
  "Function",
  "Item",
  "OpaqueItem",
  "OperationGroup",
  "SumType",
]
