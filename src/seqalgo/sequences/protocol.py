"""
The ordered-sequence abstraction every algorithm operates on.

An `OrderedSequence` is caller-owned, fixed-length from the algorithms' point
of view, and offers:

    size() -> int
    get(index) -> T
    set(index, value) -> T            # returns the previous value
    supports_random_access: bool      # True if get/set are O(1)
    cursor(index=0) -> ListCursor[T]

A `ListCursor` sits *between* elements, like a text caret: `next()` returns
the element after it and moves right, `previous()` returns the element before
it and moves left, and `set(value)` replaces whichever element was returned
last.

`IndexCursor` is a cursor built on nothing but `get`/`set`; adapters whose
backing container has no better traversal can hand it out directly.

A sequence whose positional access is slow but whose container can be read
and rewritten wholesale in linear time may also implement `BulkSequence`
(`dump()` / `load(items)`). Algorithms then work on a list copy instead of
walking a cursor.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Protocol, TypeVar, runtime_checkable

from seqalgo.errors import IllegalCursorState, IndexOutOfBounds

__all__ = ["OrderedSequence", "ListCursor", "BulkSequence", "Comparator", "IndexCursor"]

T = TypeVar("T")

# Three-way comparison: negative, zero or positive.
Comparator = Callable[[Any, Any], int]


@runtime_checkable
class ListCursor(Protocol[T]):
    def has_next(self) -> bool: ...

    def next(self) -> T: ...

    def has_previous(self) -> bool: ...

    def previous(self) -> T: ...

    def next_index(self) -> int: ...

    def set(self, value: T) -> None: ...


@runtime_checkable
class OrderedSequence(Protocol[T]):
    supports_random_access: bool

    def size(self) -> int: ...

    def get(self, index: int) -> T: ...

    def set(self, index: int, value: T) -> T: ...

    def cursor(self, index: int = 0) -> ListCursor[T]: ...


@runtime_checkable
class BulkSequence(Protocol[T]):
    def dump(self) -> List[T]:
        """Return the elements, in order, as a new list."""
        ...

    def load(self, items: List[T]) -> None:
        """Replace the elements with `items` (same length), in order."""
        ...


class IndexCursor(Generic[T]):
    """Cursor over any `OrderedSequence`, implemented with positional access."""

    def __init__(self, sequence: OrderedSequence[T], index: int = 0) -> None:
        size = sequence.size()
        if not 0 <= index <= size:
            raise IndexOutOfBounds(f"cursor index {index} outside [0, {size}]")
        self._seq = sequence
        self._pos = index
        self._last = -1

    def has_next(self) -> bool:
        return self._pos < self._seq.size()

    def next(self) -> T:
        if not self.has_next():
            raise IndexOutOfBounds(f"no element after position {self._pos}")
        value = self._seq.get(self._pos)
        self._last = self._pos
        self._pos += 1
        return value

    def has_previous(self) -> bool:
        return self._pos > 0

    def previous(self) -> T:
        if not self.has_previous():
            raise IndexOutOfBounds("no element before position 0")
        self._pos -= 1
        value = self._seq.get(self._pos)
        self._last = self._pos
        return value

    def next_index(self) -> int:
        return self._pos

    def set(self, value: T) -> None:
        if self._last < 0:
            raise IllegalCursorState("set() called before next() or previous()")
        self._seq.set(self._last, value)
