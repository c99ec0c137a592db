"""
Backend Registry.

Maps output formats to the backend classes that produce them.
"""

from typing import Dict, List, Type, Union

from noble.compiler.backend import CompilerBackend
from noble.compiler.backends import DocumentBackend, RustBackend
from noble.enums import OutputFormat

_BACKENDS: Dict[OutputFormat, Type[CompilerBackend]] = {
  OutputFormat.RUST: RustBackend,
  OutputFormat.JSON: DocumentBackend,
}

_SUFFIXES: Dict[OutputFormat, str] = {
  OutputFormat.RUST: ".rs",
  OutputFormat.JSON: ".json",
}


def get_backend_class(fmt: Union[OutputFormat, str]) -> Type[CompilerBackend]:
  """
  Returns the backend class for an output format.

  Raises:
      ValueError: If the format is unknown.
  """
  return _BACKENDS[OutputFormat(fmt)]


def output_suffix(fmt: Union[OutputFormat, str]) -> str:
  """Returns the file extension used for ``fmt`` (e.g. '.rs')."""
  return _SUFFIXES[OutputFormat(fmt)]


def available_formats() -> List[str]:
  return [f.value for f in _BACKENDS]
