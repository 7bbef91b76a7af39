"""Errors raised by the transition engine."""

from __future__ import annotations

from typing import Any


class UnknownEntityKind(ValueError):
    """Raised when a caller passes a kind tag outside the fixed enumeration.

    This is a programmer error. Unknown *states* never raise.
    """

    def __init__(self, kind: Any) -> None:
        super().__init__(f"unknown entity kind: {kind!r}")
        self.kind = kind
