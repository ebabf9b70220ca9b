"""
Registry of operations a sweep can time.

Each entry binds an algorithm to everything except its sequence argument:
`run(seq, rng, thresholds)`. Operations that need sorted input (binary
search) set `needs_sorted`; the sweep sorts the dataset once, outside timing.

Access modes decide which container backs each sample:
    "random"      list   -> ListSequence   (random access)
    "sequential"  deque  -> DequeSequence  (dump / load past threshold)
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import numpy as np

from seqalgo.algorithms import (
    binary_search,
    fill,
    maximum,
    minimum,
    replace_all,
    reverse,
    rotate,
    shuffle,
    sort,
)
from seqalgo.config import Thresholds
from seqalgo.sequences import DequeSequence, ListSequence, OrderedSequence

__all__ = ["OperationSpec", "OPERATIONS", "ACCESS_MODES", "build_sequence"]


@dataclass(frozen=True)
class OperationSpec:
    name: str
    run: Callable[[OrderedSequence[Any], np.random.Generator, Thresholds], Any]
    needs_sorted: bool = False


def _middle(seq: OrderedSequence[Any]) -> Any:
    return seq.get(seq.size() // 2) if seq.size() else 0


OPERATIONS: Dict[str, OperationSpec] = {
    spec.name: spec
    for spec in (
        OperationSpec("sort", lambda s, rng, th: sort(s)),
        OperationSpec(
            "binary_search",
            lambda s, rng, th: binary_search(s, _middle(s), thresholds=th),
            needs_sorted=True,
        ),
        OperationSpec("reverse", lambda s, rng, th: reverse(s, thresholds=th)),
        OperationSpec("shuffle", lambda s, rng, th: shuffle(s, rng, thresholds=th)),
        OperationSpec("fill", lambda s, rng, th: fill(s, 0, thresholds=th)),
        OperationSpec("rotate", lambda s, rng, th: rotate(s, s.size() // 3, thresholds=th)),
        OperationSpec("replace_all", lambda s, rng, th: replace_all(s, 0, 1, thresholds=th)),
        OperationSpec("minimum", lambda s, rng, th: minimum(s)),
        OperationSpec("maximum", lambda s, rng, th: maximum(s)),
    )
}

ACCESS_MODES = ("random", "sequential")


def build_sequence(values: List[Any], access: str) -> OrderedSequence[Any]:
    """Fresh sequence over a copy of `values` for the given access mode."""
    if access == "random":
        return ListSequence(list(values))
    if access == "sequential":
        return DequeSequence(deque(values))
    raise ValueError(f"Unknown access mode {access!r}; expected one of {ACCESS_MODES}")
