"""
Tests for operations on real `collections.deque` containers.

A deque is indexed in O(n) towards its middle, so past the thresholds the
algorithms must reach it only through `DequeSequence.dump` / `load`. The
`CountingDeque` below counts positional reads and writes; iteration, `clear`
and `extend` do not go through `__getitem__` / `__setitem__`, so a linear
traversal leaves the count at zero.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, List

import numpy as np
import pytest

from seqalgo import (
    BulkSequence,
    InvalidArgument,
    binary_search,
    copy,
    fill,
    maximum,
    minimum,
    replace_all,
    reverse,
    rotate,
    shuffle,
    sort,
)
from seqalgo.sequences import DequeSequence

N = 3000


class CountingDeque(deque):
    """deque that counts `d[i]` reads and `d[i] = v` writes."""

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self.indexed = 0

    def __getitem__(self, index):
        self.indexed += 1
        return super().__getitem__(index)

    def __setitem__(self, index, value) -> None:
        self.indexed += 1
        super().__setitem__(index, value)


def _scrambled(n: int) -> List[int]:
    return np.random.default_rng(7).permutation(n).tolist()


@pytest.mark.parametrize(
    "name, op, expected",
    [
        ("fill", lambda d: fill(d, 0), lambda a: [0] * len(a)),
        ("reverse", reverse, lambda a: a[::-1]),
        ("sort", sort, sorted),
        ("rotate", lambda d: rotate(d, 17), lambda a: a[-17:] + a[:-17]),
        ("replace_all", lambda d: replace_all(d, 5, -1), lambda a: [-1 if x == 5 else x for x in a]),
        ("copy", lambda d: copy(d, deque(range(N // 2))), lambda a: list(range(N // 2)) + a[N // 2:]),
    ],
)
def test_large_deque_is_never_indexed(
    name: str, op: Callable[[Any], Any], expected: Callable[[List[int]], List[int]]
) -> None:
    a = _scrambled(N)
    d = CountingDeque(a)
    op(d)
    assert list(d) == expected(a), name
    assert d.indexed == 0, f"{name} indexed the deque {d.indexed} times"


def test_large_deque_shuffle_matches_list_and_is_never_indexed() -> None:
    a = list(range(N))
    d = CountingDeque(a)
    shuffle(d, np.random.default_rng(11))
    shuffle(a, np.random.default_rng(11))
    assert list(d) == a
    assert d.indexed == 0


def test_extrema_of_wrapped_deque_is_never_indexed() -> None:
    a = _scrambled(N)
    d = CountingDeque(a)
    seq = DequeSequence(d)
    assert minimum(seq) == 0
    assert maximum(seq) == N - 1
    assert d.indexed == 0


def test_binary_search_on_large_deque_probes_by_index() -> None:
    n = 50_000
    d = CountingDeque(range(n))
    assert binary_search(d, 12_345) == 12_345
    # one read per probe: about log2(n)
    assert d.indexed <= n.bit_length()
    d.indexed = 0
    assert binary_search(d, -7) == -1
    assert d.indexed <= n.bit_length()


def test_copy_from_deque_into_list() -> None:
    src = CountingDeque(range(N))
    dest = [None] * (N + 1)
    copy(dest, src)
    assert dest == list(range(N)) + [None]
    assert src.indexed == 0


def test_small_deque_keeps_index_path(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="seqalgo"):
        reverse(deque([1, 2, 3]))
    assert any("reverse: size=3 threshold=5 -> index" in r.getMessage() for r in caplog.records)


def test_deque_sequence_dump_and_load() -> None:
    d = deque([3, 1, 2])
    seq = DequeSequence(d)
    assert isinstance(seq, BulkSequence)
    items = seq.dump()
    assert items == [3, 1, 2]
    items[0] = 9
    assert list(d) == [3, 1, 2]  # dump is a copy
    seq.load([7, 8, 9])
    assert list(d) == [7, 8, 9]
    with pytest.raises(InvalidArgument):
        seq.load([1])
    assert list(d) == [7, 8, 9]


def test_deque_with_maxlen_keeps_its_contents() -> None:
    d = deque(range(10), maxlen=10)
    reverse(d)
    assert list(d) == list(range(9, -1, -1))
    assert d.maxlen == 10
