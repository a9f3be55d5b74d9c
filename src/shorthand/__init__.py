"""Shorthand: functional iteration helpers for ordered sequences."""

from shorthand.logger import logger
from shorthand.core.exceptions import PreconditionError
from shorthand.functional.sequence import (
    filter,
    reject,
    map,
    reduce,
    all,
    any,
    none,
)
from shorthand.core.collection import FunctionalSequence

__all__ = [
    "filter",
    "reject",
    "map",
    "reduce",
    "all",
    "any",
    "none",
    "FunctionalSequence",
    "PreconditionError",
    "logger",
]
