"""
Tests for dataset generators and the validation helpers.
"""

from __future__ import annotations

import numpy as np
import pytest

import seqalgo.validate as validate
from seqalgo import ConfigError
from seqalgo.datasets import SUPPORTED_DISTS, make_dataset, make_tagged
from seqalgo.validate import (
    check_search_result,
    equals_oracle,
    first_nondecreasing_violation_index,
    is_permutation,
    is_stable,
    permutation_counter_diff,
)


@pytest.mark.parametrize(
    "spec",
    [
        {"dist": "random", "params": {"range": [-5, 5]}},
        {"dist": "sorted", "params": {"range": [0, 100]}},
        {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}},
        {"dist": "few_uniques", "params": {"k": 3}},
        {"dist": "small_range", "params": {}},
        {"dist": "reversed"},
    ],
)
def test_every_dist_is_reproducible(spec) -> None:
    a = make_dataset(50, spec, np.random.default_rng(11))
    b = make_dataset(50, spec, np.random.default_rng(11))
    assert a == b
    assert len(a) == 50
    assert all(type(x) is int for x in a)
    assert make_dataset(0, spec, np.random.default_rng(11)) == []


def test_dist_shapes() -> None:
    rng = np.random.default_rng(0)
    assert make_dataset(4, {"dist": "reversed"}, rng) == [3, 2, 1, 0]
    assert first_nondecreasing_violation_index(
        make_dataset(30, {"dist": "sorted", "params": {"range": [0, 9]}}, rng)
    ) is None
    assert len(set(make_dataset(200, {"dist": "few_uniques", "params": {"k": 4}}, rng))) <= 4
    assert all(0 <= x <= 255 for x in make_dataset(100, {"dist": "small_range"}, rng))
    assert set(SUPPORTED_DISTS) >= {"random", "sorted", "reversed"}


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "reversed"}),
        (3, {"dist": "bogus"}),
        (3, {"dist": "random", "params": {}}),
        (3, {"dist": "random", "params": {"range": [5, 1]}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": 2}}),
        (3, {"dist": "few_uniques", "params": {"k": 0}}),
        (3, "random"),
    ],
)
def test_invalid_specs(n, spec) -> None:
    with pytest.raises(ConfigError):
        make_dataset(n, spec, np.random.default_rng(0))


def test_validation_helpers() -> None:
    assert equals_oracle([3, 1, 2], [1, 2, 3])
    assert first_nondecreasing_violation_index([1, 3, 2]) == 1
    assert not is_permutation([1, 1], [1])
    assert permutation_counter_diff([1, 1, 2], [1, 3]) == {1: 1, 2: 1, 3: -1}
    assert check_search_result([10, 20], 20, 1)
    assert check_search_result([10, 20], 15, -2)
    assert not check_search_result([10, 20], 15, -1)
    assert not check_search_result([10, 20], 20, 0)


def test_is_stable_detects_reordering() -> None:
    before = make_tagged([1, 1])
    assert is_stable(before, list(before))
    assert not is_stable(before, before[::-1])


def test_validate_exports_are_helpers() -> None:
    for name in validate.__all__:
        assert callable(getattr(validate, name)), name
