"""
Property helpers for validating algorithm results.

Lightweight checks used by the test-suite and, optionally, by the benchmark
sweep to sanity-check what it timed.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable(before, after) -> bool
    check_search_result(a, key, result) -> bool
    assert_length_preserved(before, after) -> None

Notes
-----
- Stability cannot be inferred from values alone when equal keys are
  indistinguishable. `is_stable` therefore works on tagged records (see
  `seqalgo.datasets.make_tagged`): elements with a `.key` used for ordering and
  a `.tag` recording their original position.
- The multiset helpers use `collections.Counter`, so elements must be hashable.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Dict, List, Sequence

from seqalgo.validate.oracle import oracle_insertion_point

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "check_search_result",
    "assert_length_preserved",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> int | None:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i + 1] < xs[i]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_stable(before: Sequence[Any], after: Sequence[Any]) -> bool:
    """
    True iff, for every key, the tags of records sharing that key appear in
    `after` in the same relative order as in `before`.
    """
    def tags_by_key(records: Sequence[Any]) -> Dict[Any, List[Any]]:
        groups: Dict[Any, List[Any]] = defaultdict(list)
        for r in records:
            groups[r.key].append(r.tag)
        return groups

    return tags_by_key(before) == tags_by_key(after)


def check_search_result(a: Sequence[Any], key: Any, result: int) -> bool:
    """
    Validate a `binary_search` result against sorted `a`.

    Non-negative results must point at an element equal to `key`; negative
    results must encode the correct insertion point of an absent key.
    """
    if result >= 0:
        return result < len(a) and a[result] == key
    point = -result - 1
    return key not in a and point == oracle_insertion_point(a, key)


def assert_length_preserved(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that an in-place operation left the length unchanged.

    Raises AssertionError with a concise message otherwise.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Length changed from {len(before)} to {len(after)}"
        )
