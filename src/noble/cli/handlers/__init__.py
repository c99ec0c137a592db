from .check import handle_check
from .expand import handle_expand

__all__ = ["handle_check", "handle_expand"]
