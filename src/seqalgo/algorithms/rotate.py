"""
Rotation by a distance.

After `rotate(seq, d)` the element at index i is the one previously at
(i - d) mod size. Negative, zero and oversized distances are all valid;
e.g. rotating [t, a, n, k, s] by 1 (or by -4) gives [s, t, a, n, k].

Small or random-access sequences use cycle-leader rotation: each element is
moved once, straight to its final slot. A BulkSequence is rotated the same way
on a list copy. Other large sequential ones are rotated with three reversals
(prefix, suffix, whole), each done with cursors.
"""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import BUFFER, INDEX, buffered, pick_strategy, require_index
from seqalgo.algorithms.reverse import reverse_range
from seqalgo.config import Thresholds, resolve_thresholds
from seqalgo.sequences import OrderedSequence, as_sequence

__all__ = ["rotate"]


def rotate(sequence: Any, distance: int, *, thresholds: Optional[Thresholds] = None) -> None:
    """
    Rotate `sequence` in place by `distance` positions towards higher indices.

    Raises UnsupportedMutation if a write is needed and the sequence rejects it.
    """
    seq = as_sequence(sequence)
    distance = require_index(distance, "distance")
    th = resolve_thresholds(thresholds)
    size = seq.size()
    if size == 0:
        return
    strategy = pick_strategy(seq, size, th.rotate, "rotate")
    if strategy == INDEX:
        _rotate_cycles(seq, size, distance)
    elif strategy == BUFFER:
        with buffered(seq) as buf:
            _rotate_cycles(buf, size, distance)
    else:
        _rotate_reversals(seq, size, distance, th)


def _rotate_cycles(seq: OrderedSequence[Any], size: int, distance: int) -> None:
    distance %= size
    if distance == 0:
        return
    moved = 0
    cycle_start = 0
    while moved != size:
        displaced = seq.get(cycle_start)
        i = cycle_start
        while True:
            i += distance
            if i >= size:
                i -= size
            displaced = seq.set(i, displaced)
            moved += 1
            if i == cycle_start:
                break
        cycle_start += 1


def _rotate_reversals(seq: OrderedSequence[Any], size: int, distance: int, th: Thresholds) -> None:
    mid = -distance % size
    if mid == 0:
        return
    reverse_range(seq, 0, mid, th)
    reverse_range(seq, mid, size, th)
    reverse_range(seq, 0, size, th)
