"""
Oracles for the sorting and searching operations.

Python's built-in `sorted()` is the ground truth for `sort` (stable,
deterministic, same natural order) and `bisect` is the ground truth for
insertion points.

Public API (stable):
    oracle_sort(a: Sequence) -> list
    equals_oracle(a: Sequence, out: Sequence) -> bool
    oracle_insertion_point(a: Sequence, key) -> int

Conventions:
- Oracles never mutate their input.
- `oracle_insertion_point` expects `a` already sorted ascending.
"""

from __future__ import annotations

import bisect
from typing import Any, List, Sequence

__all__ = ["oracle_sort", "equals_oracle", "oracle_insertion_point"]


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in stable ascending order."""
    return sorted(a)


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """True iff `out` is element-wise equal to `oracle_sort(a)`."""
    return list(out) == oracle_sort(a)


def oracle_insertion_point(a: Sequence[Any], key: Any) -> int:
    """
    Index at which `key` would be inserted to keep `a` sorted.

    For a key absent from `a` this is the index of the first element greater
    than `key`, or len(a); the left and right bisection points coincide.
    """
    return bisect.bisect_left(a, key)
