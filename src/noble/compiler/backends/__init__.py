"""
Emission Backends.

- ``rust``: Rust source text.
- ``json``: Item documents, the same format the front end reads.
"""

from noble.compiler.backends.document import DocumentBackend
from noble.compiler.backends.rust import RustBackend

__all__ = ["DocumentBackend", "RustBackend"]
