"""
Enumerations for noble.

This module defines the closed set of item kinds the expander understands,
and the small vocabularies shared by the IR, the front end and the backends.
"""

from enum import Enum


class ItemKind(str, Enum):
  """
  The five item shapes that can carry the ``#[noble]`` annotation.

  Every per-kind table in the package (dispatcher, backends) is checked
  against this enum at import time.
  """

  FUNCTION = "fn"
  DATA_RECORD = "struct"
  OPERATION_GROUP = "impl"
  SUM_TYPE = "enum"
  CONTRACT = "trait"


class FieldStyle(str, Enum):
  """
  Shape of a field list (record body or enum variant).
  """

  NAMED = "named"  # { a: T }
  POSITIONAL = "positional"  # (T, U)
  UNIT = "unit"  # no fields


class GenericKind(str, Enum):
  """Kind of a generic parameter."""

  LIFETIME = "lifetime"
  TYPE = "type"
  CONST = "const"


class OutputFormat(str, Enum):
  """
  Serialization targets for an expanded compilation unit.
  """

  RUST = "rust"
  JSON = "json"


class Severity(str, Enum):
  """Diagnostic severity."""

  ERROR = "error"
  WARNING = "warning"
