"""
Positional swap.

    swap(seq, i, j)

Both indices must lie in [0, size); negative indices are rejected rather than
counted from the end. With `i == j` the sequence ends up unchanged, though the
element is still written back (so a read-only sequence raises).
"""

from __future__ import annotations

from typing import Any, List

from seqalgo.algorithms._common import require_index
from seqalgo.errors import IndexOutOfBounds
from seqalgo.sequences import OrderedSequence, as_sequence

__all__ = ["swap"]


def swap(sequence: Any, i: int, j: int) -> None:
    """
    Exchange the elements at positions `i` and `j`.

    Raises
    ------
    IndexOutOfBounds
        If either index is outside [0, size). Nothing is written in that case.
    UnsupportedMutation
        If the sequence rejects `set`.
    """
    seq = as_sequence(sequence)
    i = require_index(i, "i")
    j = require_index(j, "j")
    size = seq.size()
    for name, idx in (("i", i), ("j", j)):
        if not 0 <= idx < size:
            raise IndexOutOfBounds(f"{name}={idx} outside [0, {size})")
    swap_positions(seq, i, j)


def swap_positions(seq: OrderedSequence[Any], i: int, j: int) -> None:
    # The second set() stores what the first one displaced.
    seq.set(i, seq.set(j, seq.get(i)))


def swap_items(arr: List[Any], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]
