"""Immutable ordered collection carrying the functional toolkit as methods.

:class:`FunctionalSequence` is the object-style counterpart of
:mod:`shorthand.functional.sequence`: the same seven operations, attached to
a read-only sequence type so calls can be chained::

    >>> FunctionalSequence.of(1, 2, 3, 4).filter(lambda x: x > 1).map(str).to_list()
    ['2', '3', '4']

Every method delegates to the free function of the same name, so ordering,
short-circuiting and error propagation are identical between the two styles.
Results of ``filter``, ``reject``, ``map`` and slicing are new instances; the
original is never modified (the model is frozen and stores a tuple).
"""

from collections.abc import Sequence
from typing import Annotated, Any, Generic, Iterator, List, Tuple, Union, overload

from pydantic import BaseModel, ConfigDict, Field
from pydantic.functional_validators import BeforeValidator

from shorthand.functional import sequence as seq

from .types import Acc, Predicate, Reducer, T, Transform, U, ensure_sequence

__all__ = ["FunctionalSequence"]


def _as_tuple(elements: Any) -> Tuple[Any, ...]:
    return tuple(ensure_sequence(elements, "FunctionalSequence"))


class FunctionalSequence(BaseModel, Generic[T]):
    """Read-only ordered collection with functional helpers.

    Attributes:
        elements: The wrapped elements, in order.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    elements: Annotated[Tuple[T, ...], BeforeValidator(_as_tuple)] = Field(
        default=(), description="The wrapped elements, in order."
    )

    @classmethod
    def of(cls, *items: T) -> "FunctionalSequence[T]":
        return cls(elements=items)

    @classmethod
    def from_sequence(cls, sequence: Any) -> "FunctionalSequence[T]":
        """Wrap an existing ordered sequence (list, tuple, range, 1-D array...)."""
        return cls(elements=ensure_sequence(sequence, "FunctionalSequence"))

    def to_list(self) -> List[T]:
        return list(self.elements)

    # Sequence protocol

    def __len__(self) -> int:
        return len(self.elements)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> "FunctionalSequence[T]": ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[T, "FunctionalSequence[T]"]:
        if isinstance(index, slice):
            return type(self)(elements=self.elements[index])
        return self.elements[index]

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.elements)

    def __contains__(self, item: object) -> bool:
        return item in self.elements

    def __reversed__(self) -> Iterator[T]:
        return reversed(self.elements)

    def index(self, value: Any) -> int:
        return self.elements.index(value)

    def count(self, value: Any) -> int:
        return self.elements.count(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FunctionalSequence):
            return self.elements == other.elements
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.elements)

    # Functional helpers

    def filter(self, predicate: Predicate) -> "FunctionalSequence[T]":
        return type(self)(elements=seq.filter(self.elements, predicate))

    def reject(self, predicate: Predicate) -> "FunctionalSequence[T]":
        return type(self)(elements=seq.reject(self.elements, predicate))

    def map(self, transform: Transform) -> "FunctionalSequence[U]":
        # The element type may change, so the result is the unparametrized class.
        return FunctionalSequence(elements=seq.map(self.elements, transform))

    def reduce(self, initial_accumulator: Acc, reducer: Reducer) -> Acc:
        return seq.reduce(self.elements, initial_accumulator, reducer)

    def all(self, predicate: Predicate) -> bool:
        return seq.all(self.elements, predicate)

    def any(self, predicate: Predicate) -> bool:
        return seq.any(self.elements, predicate)

    def none(self, predicate: Predicate) -> bool:
        return seq.none(self.elements, predicate)


# Lets the free functions accept a FunctionalSequence as their subject.
Sequence.register(FunctionalSequence)
