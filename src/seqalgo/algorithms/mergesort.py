"""
Stable merge sort over a Python list, driven by a three-way comparison.

Tweaks over the textbook version:
- runs shorter than INSERTIONSORT_THRESHOLD are insertion-sorted in place;
- the merge is skipped when the highest element of the low half is <= the
  lowest element of the high half (already-ordered input costs one
  comparison per level);
- the two buffers swap roles at each level, so there is a single O(n)
  auxiliary copy for the whole sort.

Guaranteed O(n log n) comparisons; equal elements keep their input order.
"""

from __future__ import annotations

from typing import Any, Callable, List

__all__ = ["INSERTIONSORT_THRESHOLD", "merge_sort"]

INSERTIONSORT_THRESHOLD = 7


def merge_sort(items: List[Any], compare: Callable[[Any, Any], int]) -> None:
    """Sort `items` in place, stably, by `compare`."""
    if len(items) < 2:
        return
    aux = list(items)
    _merge_sort(aux, items, 0, len(items), compare)


def _merge_sort(
    src: List[Any],
    dest: List[Any],
    low: int,
    high: int,
    compare: Callable[[Any, Any], int],
) -> None:
    # On entry src[low:high] == dest[low:high]; on exit dest[low:high] is sorted.
    if high - low < INSERTIONSORT_THRESHOLD:
        for i in range(low + 1, high):
            j = i
            while j > low and compare(dest[j - 1], dest[j]) > 0:
                dest[j - 1], dest[j] = dest[j], dest[j - 1]
                j -= 1
        return

    mid = (low + high) >> 1
    _merge_sort(dest, src, low, mid, compare)
    _merge_sort(dest, src, mid, high, compare)

    if compare(src[mid - 1], src[mid]) <= 0:
        dest[low:high] = src[low:high]
        return

    p, q = low, mid
    for i in range(low, high):
        if q >= high or (p < mid and compare(src[p], src[q]) <= 0):
            dest[i] = src[p]
            p += 1
        else:
            dest[i] = src[q]
            q += 1
