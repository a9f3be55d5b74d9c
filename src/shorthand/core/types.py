"""Type definitions and argument validators shared across Shorthand.

Type Aliases:
    Predicate: A single-argument callable whose result is read as a boolean.
    Transform: A single-argument callable producing a replacement element.
    Reducer: A two-argument callable folding an element into an accumulator.

The validators run before any traversal so that a bad call fails loudly
instead of degrading into an empty result.
"""

import logging
from collections.abc import Sequence
from typing import Any, Callable, TypeVar, Union

import numpy as np

from .exceptions import PreconditionError

__all__ = [
    "T",
    "U",
    "Acc",
    "Predicate",
    "Transform",
    "Reducer",
    "SequenceLike",
    "ensure_sequence",
    "ensure_callable",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
Acc = TypeVar("Acc")

Predicate = Callable[[T], Any]
Transform = Callable[[T], U]
Reducer = Callable[[Acc, T], Acc]

SequenceLike = Union[Sequence[T], np.ndarray]


def ensure_sequence(sequence: Any, operation: str) -> SequenceLike:
    """Validate that ``sequence`` is an ordered, finite, re-readable input.

    Args:
        sequence: The subject of the operation.
        operation: Name of the calling operation, used in the error message.
    Returns:
        The sequence itself, unchanged.
    Raises:
        PreconditionError: If ``sequence`` is None, a multi-dimensional array,
            or not an ordered sequence (sets, mappings and iterators included).
    """
    if sequence is None:
        logger.debug(f"{operation}() called without a sequence")
        raise PreconditionError(operation, "sequence", "sequence must not be None.")

    if isinstance(sequence, np.ndarray):
        if sequence.ndim != 1:
            raise PreconditionError(
                operation,
                "sequence",
                f"array input must be 1-dimensional, got ndim={sequence.ndim}.",
            )
        return sequence

    if not isinstance(sequence, Sequence):
        logger.debug(
            f"{operation}() rejected sequence of type {type(sequence).__name__}"
        )
        raise PreconditionError(
            operation,
            "sequence",
            f"expected an ordered sequence, got {type(sequence).__name__}.",
        )
    return sequence


def ensure_callable(func: Any, role: str, operation: str) -> Callable[..., Any]:
    """Validate that ``func`` can be called.

    Args:
        func: The user-supplied predicate, transform or reducer.
        role: What the callable is used as ("predicate", "transform", "reducer").
        operation: Name of the calling operation, used in the error message.
    Returns:
        ``func`` unchanged.
    Raises:
        PreconditionError: If ``func`` is None or not callable.
    """
    if func is None:
        logger.debug(f"{operation}() called without a {role}")
        raise PreconditionError(operation, role, f"{role} must not be None.")
    if not callable(func):
        raise PreconditionError(
            operation,
            role,
            f"{role} must be callable, got {type(func).__name__}.",
        )
    return func
