"""
Frontends.

Decoders that turn host-parser output into the item model.
"""

from noble.compiler.frontends.document import load_unit, load_unit_data, load_unit_file

__all__ = ["load_unit", "load_unit_data", "load_unit_file"]
