"""Replace every occurrence of one value with another."""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import BUFFER, INDEX, pick_strategy
from seqalgo.config import Thresholds, resolve_thresholds
from seqalgo.sequences import as_sequence

__all__ = ["replace_all"]


def replace_all(
    sequence: Any,
    old: Any,
    new: Any,
    *,
    thresholds: Optional[Thresholds] = None,
) -> bool:
    """
    Replace each element equal to `old` with `new`.

    Equality is `==`, except that `old=None` matches only elements that are
    None. Returns True iff at least one element was replaced.
    """
    seq = as_sequence(sequence)
    th = resolve_thresholds(thresholds)
    size = seq.size()

    if old is None:
        def matches(x: Any) -> bool:
            return x is None
    else:
        def matches(x: Any) -> bool:
            return bool(old == x)

    replaced = False
    strategy = pick_strategy(seq, size, th.replace_all, "replace_all")
    if strategy == INDEX:
        for i in range(size):
            if matches(seq.get(i)):
                seq.set(i, new)
                replaced = True
        return replaced

    if strategy == BUFFER:
        items = seq.dump()
        for i, x in enumerate(items):
            if matches(x):
                items[i] = new
                replaced = True
        if replaced:
            seq.load(items)
        return replaced

    cur = seq.cursor()
    for _ in range(size):
        if matches(cur.next()):
            cur.set(new)
            replaced = True
    return replaced
