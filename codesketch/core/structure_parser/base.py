"""Shared interface for language-specific structural parsers.

Parsers are interchangeable strategies: each one takes raw source text and
returns a fresh StructuralModel. They do not share a base class, so adding a
language never touches the existing parsers; anything with a ``language``
attribute and a ``parse`` method can be registered.
"""

from typing import Protocol, runtime_checkable

from .models import StructuralModel


@runtime_checkable
class StructuralParser(Protocol):
    """Regex/heuristic extractor of classes, functions and relationships."""

    language: str  # "java" | "php" | "python"

    def parse(self, code: str) -> StructuralModel:
        """Extract the structural model from source text.

        Must not raise on malformed input; unrecognized declarations are
        simply absent from the result.

        Args:
            code: Raw source code

        Returns:
            A new StructuralModel (possibly empty)
        """
        ...
