"""Core types, settings and the FunctionalSequence collection."""

from shorthand.core.exceptions import PreconditionError
from shorthand.core.types import ensure_callable, ensure_sequence
from shorthand.core.collection import FunctionalSequence

__all__ = [
    "PreconditionError",
    "ensure_callable",
    "ensure_sequence",
    "FunctionalSequence",
]
