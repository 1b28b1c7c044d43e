from __future__ import annotations

from typing import Iterable, Iterator, Sequence, TypeVar, overload

from .errors import EmptySequence

T = TypeVar("T")


class NonEmpty(Sequence[T]):
    """
    Immutable sequence holding at least one element.

    Built either from a first element plus any number of others:
        >>> NonEmpty("a", "b")
        NonEmpty('a', 'b')
    or from an iterable, which raises EmptySequence when it yields nothing.
    """

    __slots__ = ("_items",)

    def __init__(self, first: T, *rest: T):
        self._items: tuple[T, ...] = (first, *rest)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "NonEmpty[T]":
        if isinstance(items, NonEmpty):
            return items
        materialized = tuple(items)
        if not materialized:
            raise EmptySequence(f"{cls.__name__} requires at least one element")
        return cls(*materialized)

    @property
    def first(self) -> T:
        return self._items[0]

    @property
    def last(self) -> T:
        return self._items[-1]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index):
        # Slices may be empty, so they come back as plain tuples.
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NonEmpty):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"NonEmpty({', '.join(repr(i) for i in self._items)})"
