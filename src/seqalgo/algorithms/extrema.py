"""
Minimum / maximum by natural order or a comparator.

One pass over the collection. The candidate is replaced only by a strictly
smaller (minimum) or strictly greater (maximum) element, so among tied
extremes the earliest one is returned.
"""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import Compare, iter_elements, make_compare
from seqalgo.errors import EmptyInput
from seqalgo.sequences import Comparator

__all__ = ["minimum", "maximum"]


def minimum(collection: Any, comparator: Optional[Comparator] = None) -> Any:
    """
    Return the least element of `collection` (any iterable or OrderedSequence).

    Raises
    ------
    EmptyInput
        If the collection has no elements.
    TypeMismatch
        If two elements are not mutually comparable.
    """
    return _extreme(collection, make_compare(comparator), sign=-1)


def maximum(collection: Any, comparator: Optional[Comparator] = None) -> Any:
    """Return the greatest element of `collection`; see `minimum`."""
    return _extreme(collection, make_compare(comparator), sign=1)


def _extreme(collection: Any, compare: Compare, sign: int) -> Any:
    it = iter_elements(collection)
    try:
        candidate = next(it)
    except StopIteration:
        raise EmptyInput("collection is empty") from None
    for value in it:
        if sign * compare(value, candidate) > 0:
            candidate = value
    return candidate
