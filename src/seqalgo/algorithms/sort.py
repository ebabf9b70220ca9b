"""
Stable in-place sort of an ordered sequence.

The sequence is dumped into a list, the list is merge-sorted, and the result
is written back in a single pass (`load` for a BulkSequence, a cursor
otherwise). Sorting a linked structure in place through positional access
would cost O(n^2 log n); this costs O(n log n) comparisons plus two linear
passes whatever backs the sequence.
"""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import make_compare, to_list, write_back
from seqalgo.algorithms.mergesort import merge_sort
from seqalgo.sequences import Comparator, as_sequence

__all__ = ["sort"]


def sort(sequence: Any, comparator: Optional[Comparator] = None) -> None:
    """
    Sort `sequence` into ascending order, in place.

    Parameters
    ----------
    sequence : OrderedSequence or Python sequence
        Must allow element replacement; need not be resizable.
    comparator : callable(a, b) -> int, optional
        Three-way comparison. Defaults to natural (`<`) order.

    Raises
    ------
    TypeMismatch
        If two elements are not mutually comparable.
    UnsupportedMutation
        If the sequence rejects `set` (raised on the first write, so an empty
        read-only sequence is accepted).
    """
    seq = as_sequence(sequence)
    compare = make_compare(comparator)
    items = to_list(seq)
    merge_sort(items, compare)
    write_back(seq, items)
