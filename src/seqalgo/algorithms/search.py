"""
Binary search over a sorted ordered sequence.

Return convention:
    index of `key`                   if it is present
    -(insertion_point) - 1           otherwise

where the insertion point is the index of the first element greater than
`key`, or `size()` if every element is smaller. The result is >= 0 iff the
key was found.

Random-access (or small) sequences use indexed probing, as do BulkSequences
such as a deque. Other large sequential sequences are probed by moving one
cursor back and forth to each midpoint: still O(log n) comparisons, but O(n)
element traversals in total.

If several elements equal `key`, whichever one a probe lands on first is
returned; there is no guarantee it is the first or the last.
"""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import CURSOR, Compare, make_compare, pick_strategy
from seqalgo.config import Thresholds, resolve_thresholds
from seqalgo.sequences import Comparator, ListCursor, OrderedSequence, as_sequence

__all__ = ["binary_search"]


def binary_search(
    sequence: Any,
    key: Any,
    comparator: Optional[Comparator] = None,
    *,
    thresholds: Optional[Thresholds] = None,
) -> int:
    """
    Search an ascending-sorted `sequence` for `key`.

    Results are unspecified (but no error is raised) if the sequence is not
    sorted by the same order.

    Raises
    ------
    TypeMismatch
        If `key` is not mutually comparable with a probed element.
    """
    seq = as_sequence(sequence)
    compare = make_compare(comparator)
    th = resolve_thresholds(thresholds)
    size = seq.size()
    if pick_strategy(seq, size, th.binary_search, "binary_search") == CURSOR:
        return _cursor_search(seq, key, compare)
    # BulkSequences are probed by index too; their cursor is positional.
    return _indexed_search(seq, key, compare)


def _indexed_search(seq: OrderedSequence[Any], key: Any, compare: Compare) -> int:
    low, high = 0, seq.size() - 1
    while low <= high:
        mid = (low + high) >> 1
        cmp = compare(seq.get(mid), key)
        if cmp < 0:
            low = mid + 1
        elif cmp > 0:
            high = mid - 1
        else:
            return mid
    return -(low + 1)


def _cursor_search(seq: OrderedSequence[Any], key: Any, compare: Compare) -> int:
    low, high = 0, seq.size() - 1
    cur = seq.cursor()
    while low <= high:
        mid = (low + high) >> 1
        cmp = compare(_step_to(cur, mid), key)
        if cmp < 0:
            low = mid + 1
        elif cmp > 0:
            high = mid - 1
        else:
            return mid
    return -(low + 1)


def _step_to(cur: ListCursor[Any], index: int) -> Any:
    """Move `cur` to `index` and return the element there."""
    pos = cur.next_index()
    value = None
    if pos <= index:
        for _ in range(index - pos + 1):
            value = cur.next()
    else:
        for _ in range(pos - index):
            value = cur.previous()
    return value
