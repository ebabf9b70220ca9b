"""
Random permutation (Fisher-Yates, backward variant).

For i from size down to 2, draw r uniformly from [0, i) and swap positions
i-1 and r. Every permutation is equally likely provided the randomness source
is unbiased.

Small or random-access sequences are shuffled in place by index. Larger
sequential ones are dumped into a list, the list is shuffled with the same
draws, and the result is written back in one pass (`load` for a
BulkSequence, a cursor otherwise), avoiding the quadratic cost of
positional swaps. Both paths consume the source
identically, so a given seed yields the same permutation either way.
"""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import INDEX, pick_strategy, to_list, write_back
from seqalgo.algorithms.swap import swap_items, swap_positions
from seqalgo.config import Thresholds, resolve_thresholds
from seqalgo.random_source import as_random_source, default_random_source
from seqalgo.sequences import as_sequence

__all__ = ["shuffle"]


def shuffle(
    sequence: Any,
    random_source: Any = None,
    *,
    thresholds: Optional[Thresholds] = None,
) -> None:
    """
    Randomly permute `sequence` in place.

    Parameters
    ----------
    sequence : OrderedSequence or Python sequence
    random_source : RandomSource | numpy.random.Generator | random.Random, optional
        Source of the draws. When omitted the process-wide default source is
        used (see `seqalgo.random_source.default_random_source`); that source
        is not safe to draw from concurrently.

    Raises
    ------
    UnsupportedMutation
        If the sequence rejects `set` and has at least 2 elements.
    """
    seq = as_sequence(sequence)
    source = default_random_source() if random_source is None else as_random_source(random_source)
    th = resolve_thresholds(thresholds)
    size = seq.size()

    if pick_strategy(seq, size, th.shuffle, "shuffle") == INDEX:
        for i in range(size, 1, -1):
            swap_positions(seq, i - 1, source.next_int(i))
        return

    items = to_list(seq)
    for i in range(size, 1, -1):
        swap_items(items, i - 1, source.next_int(i))
    write_back(seq, items)
