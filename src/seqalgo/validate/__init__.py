"""
Validation utilities public API.

Re-exports:
    - Oracle:
        oracle_sort
        equals_oracle
        oracle_insertion_point

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        is_permutation
        permutation_counter_diff
        is_stable
        check_search_result
        assert_length_preserved
"""

from .oracle import equals_oracle, oracle_insertion_point, oracle_sort
from .properties import (
    assert_length_preserved,
    check_search_result,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable,
    permutation_counter_diff,
)

__all__ = [
    "oracle_sort",
    "equals_oracle",
    "oracle_insertion_point",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "check_search_result",
    "assert_length_preserved",
]
