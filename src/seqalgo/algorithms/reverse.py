"""
In-place reversal, linear time.

Small or random-access sequences swap position i with size-1-i. Larger
sequential ones are either reversed on a list copy (BulkSequence) or by
walking two cursors inward from both ends, exchanging what each has just
passed, so no element is located by index.
"""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import CURSOR, INDEX, buffered, pick_strategy
from seqalgo.algorithms.swap import swap_positions
from seqalgo.config import Thresholds, resolve_thresholds
from seqalgo.sequences import OrderedSequence, as_sequence

__all__ = ["reverse"]


def reverse(sequence: Any, *, thresholds: Optional[Thresholds] = None) -> None:
    """
    Reverse `sequence` in place.

    Raises
    ------
    UnsupportedMutation
        If the sequence rejects `set` (sequences shorter than 2 are never
        written, so they never raise).
    """
    seq = as_sequence(sequence)
    reverse_range(seq, 0, seq.size(), resolve_thresholds(thresholds))


def reverse_range(seq: OrderedSequence[Any], start: int, stop: int, th: Thresholds) -> None:
    """Reverse positions [start, stop) of `seq`."""
    length = stop - start
    if length < 2:
        return
    strategy = pick_strategy(seq, length, th.reverse, "reverse")
    if strategy == INDEX:
        _swap_inward(seq, start, stop)
    elif strategy == CURSOR:
        _cursors_inward(seq, start, stop)
    else:
        with buffered(seq) as buf:
            _swap_inward(buf, start, stop)


def _swap_inward(seq: OrderedSequence[Any], start: int, stop: int) -> None:
    i, j = start, stop - 1
    while i < j:
        swap_positions(seq, i, j)
        i += 1
        j -= 1


def _cursors_inward(seq: OrderedSequence[Any], start: int, stop: int) -> None:
    fwd = seq.cursor(start)
    rev = seq.cursor(stop)
    for _ in range((stop - start) >> 1):
        tmp = fwd.next()
        fwd.set(rev.previous())
        rev.set(tmp)
