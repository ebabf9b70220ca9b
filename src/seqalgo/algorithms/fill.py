"""Bulk overwrite of every element with one value."""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import BUFFER, INDEX, pick_strategy
from seqalgo.config import Thresholds, resolve_thresholds
from seqalgo.sequences import as_sequence

__all__ = ["fill"]


def fill(sequence: Any, value: Any, *, thresholds: Optional[Thresholds] = None) -> None:
    """
    Replace every element of `sequence` with `value` (which may be None).
    Linear time; the size is unchanged.

    Raises UnsupportedMutation if the sequence is non-empty and rejects `set`.
    """
    seq = as_sequence(sequence)
    th = resolve_thresholds(thresholds)
    size = seq.size()
    strategy = pick_strategy(seq, size, th.fill, "fill")
    if strategy == INDEX:
        for i in range(size):
            seq.set(i, value)
        return
    if strategy == BUFFER:
        seq.load([value] * size)
        return

    cur = seq.cursor()
    for _ in range(size):
        cur.next()
        cur.set(value)
