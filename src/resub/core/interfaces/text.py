from __future__ import annotations
"""Text transformer protocol definitions."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextTransformerProtocol(Protocol):
    """Protocol for the substitution primitive.

    Implementations replace every non-overlapping match of a compiled
    pattern in `text` and return the result; they hold no mutable state.
    """

    def apply(self, text: str) -> str:
        ...
