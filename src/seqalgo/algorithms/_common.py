"""
Helpers shared by the algorithm modules: argument coercion, comparison,
traversal-strategy selection and bulk dump / write-back.
"""

from __future__ import annotations

import logging
import numbers
import operator
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

from seqalgo.errors import InvalidArgument, TypeMismatch
from seqalgo.sequences import BulkSequence, Comparator, ListSequence, OrderedSequence

logger = logging.getLogger("seqalgo.algorithms")

Compare = Callable[[Any, Any], int]

# Traversal strategies returned by pick_strategy.
INDEX = "index"
BUFFER = "buffer"
CURSOR = "cursor"


def require_index(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} must be an integer; got {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidArgument(f"{name} must be an integer; got {value!r}") from e


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison under natural (`<`) order."""
    try:
        if a < b:
            return -1
        if b < a:
            return 1
        return 0
    except TypeError as e:
        raise TypeMismatch(
            f"{type(a).__name__} and {type(b).__name__} are not mutually comparable"
        ) from e


def make_compare(comparator: Optional[Comparator]) -> Compare:
    if comparator is None:
        return natural_compare
    if not callable(comparator):
        raise InvalidArgument(f"comparator must be callable; got {comparator!r}")

    def compare(a: Any, b: Any) -> int:
        try:
            result = comparator(a, b)
        except TypeMismatch:
            raise
        except TypeError as e:
            raise TypeMismatch(
                f"comparator cannot order {type(a).__name__} and {type(b).__name__}"
            ) from e
        if not isinstance(result, numbers.Real):
            raise TypeMismatch(
                f"comparator must return a number; got {type(result).__name__}"
            )
        return result

    return compare


def pick_strategy(seq: OrderedSequence[Any], size: int, threshold: int, op: str) -> str:
    """
    How `op` should traverse `seq`:

        INDEX   size < threshold, or the sequence has random access
        BUFFER  otherwise, if the sequence is a BulkSequence
        CURSOR  otherwise
    """
    if size < threshold or seq.supports_random_access:
        strategy = INDEX
    elif isinstance(seq, BulkSequence):
        strategy = BUFFER
    else:
        strategy = CURSOR
    logger.debug("%s: size=%d threshold=%d -> %s", op, size, threshold, strategy)
    return strategy


@contextmanager
def buffered(seq: BulkSequence[Any]) -> Iterator[ListSequence[Any]]:
    """Work on a list copy of `seq`, loaded back into it on normal exit."""
    items = seq.dump()
    yield ListSequence(items)
    seq.load(items)


def to_list(seq: OrderedSequence[Any]) -> List[Any]:
    if isinstance(seq, BulkSequence):
        return seq.dump()
    size = seq.size()
    if seq.supports_random_access:
        return [seq.get(i) for i in range(size)]
    cur = seq.cursor()
    return [cur.next() for _ in range(size)]


def write_back(seq: OrderedSequence[Any], items: List[Any]) -> None:
    """Overwrite `seq` position by position from `items` using one cursor pass."""
    if isinstance(seq, BulkSequence):
        seq.load(items)
        return
    cur = seq.cursor()
    for value in items:
        cur.next()
        cur.set(value)


def iter_elements(collection: Any) -> Iterator[Any]:
    if collection is None:
        raise InvalidArgument("collection must not be None")
    if isinstance(collection, BulkSequence):
        yield from collection.dump()
        return
    if isinstance(collection, OrderedSequence):
        cur = collection.cursor()
        while cur.has_next():
            yield cur.next()
        return
    try:
        it = iter(collection)
    except TypeError as e:
        raise InvalidArgument(
            f"expected an iterable or OrderedSequence; got {type(collection).__name__}"
        ) from e
    yield from it
