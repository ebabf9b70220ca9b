"""
Adapters from Python containers to `OrderedSequence`.

Every algorithm accepts either an `OrderedSequence` or a plain Python
container; the latter is wrapped by `as_sequence`:

    list / any MutableSequence   -> ListSequence      (random access)
    collections.deque            -> DequeSequence     (sequential access, bulk dump/load)
    1-D numpy.ndarray            -> ListSequence      (ReadOnlySequence if not writeable)
    tuple / str / any Sequence   -> ReadOnlySequence  (set() raises)

Adapters never copy: they are views over the caller's container, so an
in-place algorithm run on the adapter is visible in the original object.
"""

from __future__ import annotations

from collections import deque
from collections.abc import MutableSequence, Sequence
from typing import Any, Generic, Iterator, List, TypeVar

import numpy as np

from seqalgo.errors import IndexOutOfBounds, InvalidArgument, UnsupportedMutation
from seqalgo.sequences.protocol import IndexCursor, ListCursor, OrderedSequence

__all__ = ["ListSequence", "DequeSequence", "ReadOnlySequence", "as_sequence"]

T = TypeVar("T")


class _ContainerView(Generic[T]):
    supports_random_access = True

    def __init__(self, data: Any) -> None:
        self._data = data

    def size(self) -> int:
        return len(self._data)

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._data[index]

    def set(self, index: int, value: T) -> T:
        self._check_index(index)
        previous = self._data[index]
        self._data[index] = value
        return previous

    def cursor(self, index: int = 0) -> ListCursor[T]:
        return IndexCursor(self, index)

    @property
    def data(self) -> Any:
        """The wrapped container (not a copy)."""
        return self._data

    def _check_index(self, index: int) -> None:
        # Python containers accept negative indices; sequences do not.
        if not 0 <= index < len(self._data):
            raise IndexOutOfBounds(f"index {index} outside [0, {len(self._data)})")

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"


class ListSequence(_ContainerView[T]):
    """A `list` (or other MutableSequence) with constant-time positional access."""


class DequeSequence(_ContainerView[T]):
    """
    A `collections.deque`. Indexing a deque costs O(n) towards the middle, so
    it reports no random access. Its cursor is still positional; past their
    threshold algorithms go through `dump` / `load` instead, which iterate and
    rebuild the deque in linear time.
    """

    supports_random_access = False

    def dump(self) -> List[T]:
        return list(self._data)

    def load(self, items: List[T]) -> None:
        if len(items) != len(self._data):
            raise InvalidArgument(
                f"cannot load {len(items)} elements into a sequence of size {len(self._data)}"
            )
        self._data.clear()
        self._data.extend(items)


class ReadOnlySequence(_ContainerView[T]):
    """Any `Sequence` that cannot be written; `set` raises `UnsupportedMutation`."""

    def set(self, index: int, value: T) -> T:
        raise UnsupportedMutation(
            f"{type(self._data).__name__} does not support element replacement"
        )


def as_sequence(obj: Any) -> OrderedSequence[Any]:
    """
    Return `obj` as an `OrderedSequence`, wrapping Python containers.

    Raises
    ------
    InvalidArgument
        If `obj` is None, not a sequence, or an array that is not 1-D.
    """
    if obj is None:
        raise InvalidArgument("sequence must not be None")
    if isinstance(obj, OrderedSequence):
        return obj
    if isinstance(obj, deque):
        return DequeSequence(obj)
    if isinstance(obj, np.ndarray):
        if obj.ndim != 1:
            raise InvalidArgument(f"only 1-D arrays are sequences; got ndim={obj.ndim}")
        return ListSequence(obj) if obj.flags.writeable else ReadOnlySequence(obj)
    if isinstance(obj, MutableSequence):
        return ListSequence(obj)
    if isinstance(obj, Sequence):
        return ReadOnlySequence(obj)
    raise InvalidArgument(
        f"expected an OrderedSequence or a Python sequence; got {type(obj).__name__}"
    )
