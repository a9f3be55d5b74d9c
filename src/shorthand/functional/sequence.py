"""Single-pass functional operations over ordered sequences.

Every function takes the subject sequence first and the user callable second
(``reduce`` takes the initial accumulator before the reducer). The input is
never mutated and never returned: ``filter``, ``reject`` and ``map`` always
build a fresh ``list``.

Traversal is strictly left to right. ``filter``, ``reject`` and ``map`` call
their callable exactly once per element; ``all``, ``any`` and ``none`` stop at
the first element that decides the result.

Exceptions raised by a user callable propagate unchanged and abort the call,
so no partial result is ever returned. Missing or non-callable arguments raise
:class:`~shorthand.core.exceptions.PreconditionError` before any element is
visited.

Note:
    The names mirror the conventional functional vocabulary and therefore
    shadow the builtins of the same name inside this module. Import the module
    (``from shorthand.functional import sequence as seq``) rather than its
    members when the builtins are also needed.

Examples:
    >>> from shorthand.functional import sequence as seq
    >>> seq.filter([1, 2, 3, 4], lambda x: x % 2 == 0)
    [2, 4]
    >>> seq.reduce([1, 2, 3], 0, lambda acc, x: acc + x)
    6
    >>> seq.none([1, 2, 3], lambda x: x > 5)
    True
"""

import logging
from typing import List

from shorthand.core.types import (
    Acc,
    Predicate,
    Reducer,
    SequenceLike,
    T,
    Transform,
    U,
    ensure_callable,
    ensure_sequence,
)

__all__ = [
    "filter",
    "reject",
    "map",
    "reduce",
    "all",
    "any",
    "none",
]

logger = logging.getLogger(__name__)


def _partition_pass(
    sequence: SequenceLike, predicate: Predicate, keep: bool
) -> List[T]:
    # Shared by filter and reject: one predicate call per element, in order.
    result = []
    for element in sequence:
        if bool(predicate(element)) is keep:
            result.append(element)
    return result


def filter(sequence: SequenceLike, predicate: Predicate) -> List[T]:
    """Return the elements for which ``predicate`` is truthy.

    Args:
        sequence: Ordered input sequence.
        predicate: Called once per element, in order.

    Returns:
        List[T]: A new list with the passing elements in their original order.
    """
    ensure_sequence(sequence, "filter")
    ensure_callable(predicate, "predicate", "filter")

    result = _partition_pass(sequence, predicate, keep=True)
    logger.debug(f"filter() kept {len(result)} of {len(sequence)} elements")
    return result


def reject(sequence: SequenceLike, predicate: Predicate) -> List[T]:
    """Return the elements for which ``predicate`` is falsy.

    The complement of :func:`filter`: the two results together partition the
    input.
    """
    ensure_sequence(sequence, "reject")
    ensure_callable(predicate, "predicate", "reject")

    result = _partition_pass(sequence, predicate, keep=False)
    logger.debug(f"reject() kept {len(result)} of {len(sequence)} elements")
    return result


def map(sequence: SequenceLike, transform: Transform) -> List[U]:
    """Apply ``transform`` to every element.

    ``None`` results are kept; the output always has the input's length.

    Args:
        sequence: Ordered input sequence.
        transform: Called once per element, in order.

    Returns:
        List[U]: ``[transform(x) for x in sequence]``.
    """
    ensure_sequence(sequence, "map")
    ensure_callable(transform, "transform", "map")

    return [transform(element) for element in sequence]


def reduce(sequence: SequenceLike, initial_accumulator: Acc, reducer: Reducer) -> Acc:
    """Fold ``sequence`` from the left into ``initial_accumulator``.

    Unlike :func:`functools.reduce` the initial value is mandatory, and an
    empty sequence returns it as-is without calling ``reducer``.

    Args:
        sequence: Ordered input sequence.
        initial_accumulator: Starting accumulator; its type is independent of
            the element type.
        reducer: ``reducer(accumulator, element)`` returning the next
            accumulator.

    Returns:
        Acc: The accumulator after every element has been folded in.
    """
    ensure_sequence(sequence, "reduce")
    ensure_callable(reducer, "reducer", "reduce")

    accumulator = initial_accumulator
    for element in sequence:
        accumulator = reducer(accumulator, element)
    return accumulator


def all(sequence: SequenceLike, predicate: Predicate) -> bool:
    """True if every element passes; stops at the first failure.

    An empty sequence is vacuously true.
    """
    ensure_sequence(sequence, "all")
    ensure_callable(predicate, "predicate", "all")

    for element in sequence:
        if not predicate(element):
            return False
    return True


def any(sequence: SequenceLike, predicate: Predicate) -> bool:
    """True if at least one element passes; stops at the first pass.

    An empty sequence yields False.
    """
    ensure_sequence(sequence, "any")
    ensure_callable(predicate, "predicate", "any")

    for element in sequence:
        if predicate(element):
            return True
    return False


def none(sequence: SequenceLike, predicate: Predicate) -> bool:
    """True if no element passes; stops at the first pass.

    An empty sequence is vacuously true.
    """
    ensure_sequence(sequence, "none")
    ensure_callable(predicate, "predicate", "none")

    for element in sequence:
        if predicate(element):
            return False
    return True
