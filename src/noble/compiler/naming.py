"""
Deterministic Naming of Generated Operations.

Generated constructor names are part of the public surface of annotated types
and must stay stable across releases:

* Records: ``new_unsafe``
* Sum types: ``new_<variant>_unsafe`` with the variant name lowercased.
"""

from typing import Optional

CONSTRUCTOR_PREFIX = "new"
CONSTRUCTOR_SUFFIX = "unsafe"
RAW_IDENT_PREFIX = "r#"


def constructor_name(type_name: str, variant_name: Optional[str] = None) -> str:
  """
  Builds the name of a generated constructor.

  The type name does not currently influence the result; it is part of the
  signature so that a future convention can depend on it without touching
  callers.

  Args:
      type_name (str): Name of the record or sum type.
      variant_name (Optional[str]): Variant name for sum-type constructors.

  Returns:
      str: The constructor identifier.

  Examples:
      >>> constructor_name("Point")
      'new_unsafe'
      >>> constructor_name("Shape", "Circle")
      'new_circle_unsafe'
  """
  if variant_name is None:
    return f"{CONSTRUCTOR_PREFIX}_{CONSTRUCTOR_SUFFIX}"

  if variant_name.startswith(RAW_IDENT_PREFIX):
    variant_name = variant_name[len(RAW_IDENT_PREFIX) :]

  return f"{CONSTRUCTOR_PREFIX}_{variant_name.lower()}_{CONSTRUCTOR_SUFFIX}"
