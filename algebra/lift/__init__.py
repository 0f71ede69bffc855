"""
Lift helpers with semantic namespaces.

    from algebra import lift as L

    L.up.catching(lambda: int(s), on_error=...)          # Success(int) | Failure(...)
    L.up.from_optional(lookup(key), error=NotFound)
    L.down.error_of(result)                              # error or None

The functions are also available at the root (L.catching, L.error_of).
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .up import catching, from_optional
from .down import error_of, to_optional

# Namespace aliases: L.up.*, L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
    "from_optional",
    "catching",
    # Down
    "to_optional",
    "error_of",
)
