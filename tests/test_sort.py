"""
Correctness tests for `sort` against the oracle (Python's built-in sorted).

What we check:
- Output exactly matches the oracle (strongest guarantee)
- Nondecreasing order (diagnostic)
- Permutation preservation (no lost/duplicated elements)
- Stability on tagged records
- Idempotence: sorting sorted input changes nothing
- Error contract: incomparable elements, read-only sequences
"""

from __future__ import annotations

from collections import deque
from functools import cmp_to_key
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from seqalgo import InvalidArgument, TypeMismatch, UnsupportedMutation, sort
from seqalgo.algorithms import merge_sort
from seqalgo.algorithms._common import natural_compare
from seqalgo.datasets import make_tagged
from seqalgo.validate import is_nondecreasing, is_permutation, is_stable, oracle_sort


# ------------------------- helpers ------------------------- #

def _check_one(a: List[int]) -> None:
    """Common assertion bundle for one input."""
    work = list(a)
    sort(work)

    assert work == oracle_sort(a), "Output must exactly match the oracle"
    assert is_nondecreasing(work), "Output is not nondecreasing"
    assert is_permutation(a, work), "Output is not a permutation of input"

    again = list(work)
    sort(again)
    assert again == work, "Sorting sorted input must not change it"


# ------------------------- unit tests (deterministic) ------------------------- #

@pytest.mark.parametrize(
    "a",
    [
        [],
        [5],
        [2, 1],
        [1, 2, 3, 4],
        [4, 3, 2, 1],
        [7, 7, 7, 7],
        [1, 3, 2, 3, 1, 2],
        list(range(20)),
        list(range(20))[::-1],
        [0, -1, 5, -10, 3, 3, 2],
    ],
)
def test_unit_cases(a: List[int]) -> None:
    _check_one(a)


def test_sorts_deque() -> None:
    d = deque([9, 3, 7, 1, 8, 2, 6])
    sort(d)
    assert list(d) == [1, 2, 3, 6, 7, 8, 9]


def test_writes_back_with_one_cursor_pass(recording) -> None:
    seq = recording([3, 1, 2], random_access=False)
    sort(seq)
    assert seq.values == [1, 2, 3]
    assert ("set", 0) not in seq.events
    assert seq.events.count(("cursor", 0)) == 2  # one dump, one write-back


def test_comparator_descending() -> None:
    a = ["bb", "a", "ccc"]
    sort(a, lambda x, y: len(y) - len(x))
    assert a == ["ccc", "bb", "a"]


def test_stable_on_equal_keys() -> None:
    records = make_tagged([3, 1, 3, 2, 1, 3, 2, 1, 1, 3, 2, 2])
    work = list(records)
    sort(work)
    assert [r.key for r in work] == sorted(r.key for r in records)
    assert is_stable(records, work)


def test_comparator_returning_a_non_number_raises_type_mismatch() -> None:
    with pytest.raises(TypeMismatch):
        sort([3, 1, 2], lambda a, b: None)
    with pytest.raises(TypeMismatch):
        sort(list(range(20, 0, -1)), lambda a, b: "less")


def test_incomparable_elements_raise_type_mismatch() -> None:
    with pytest.raises(TypeMismatch):
        sort([1, "a", 2])
    # still a TypeError for callers who don't know the taxonomy
    with pytest.raises(TypeError):
        sort(["a", None])


def test_read_only_sequence_raises() -> None:
    with pytest.raises(UnsupportedMutation):
        sort((2, 1))
    with pytest.raises(UnsupportedMutation):
        sort((1, 2))  # already sorted: still a write


def test_empty_read_only_sequence_is_accepted() -> None:
    sort(())


def test_none_is_invalid_argument() -> None:
    with pytest.raises(InvalidArgument):
        sort(None)


# ------------------------- merge sort directly ------------------------- #

def test_merge_sort_matches_sorted_with_cmp_to_key() -> None:
    a = [5, 3, 9, 1, 5, 7, 2, 8, 0, 6, 4, 9, 1]
    expected = sorted(a, key=cmp_to_key(natural_compare))
    merge_sort(a, natural_compare)
    assert a == expected


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@settings(deadline=None, max_examples=100)
@given(st.lists(small_ints, min_size=0, max_size=400))
def test_property_random_small_range(a: List[int]) -> None:
    _check_one(a)


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=0, max_value=255), min_size=0, max_size=600))
def test_property_many_duplicates(a: List[int]) -> None:
    _check_one(a)


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=0, max_value=5), min_size=0, max_size=200))
def test_property_stability(keys: List[int]) -> None:
    records = make_tagged(keys)
    work = deque(records)
    sort(work)
    assert is_stable(records, list(work))
    assert is_nondecreasing([r.key for r in work])
