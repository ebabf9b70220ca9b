"""Element-wise copy from one ordered sequence into another."""

from __future__ import annotations

from typing import Any, Optional

from seqalgo.algorithms._common import BUFFER, CURSOR, INDEX, buffered, logger
from seqalgo.config import Thresholds, resolve_thresholds
from seqalgo.errors import IndexOutOfBounds
from seqalgo.sequences import BulkSequence, ListSequence, OrderedSequence, as_sequence

__all__ = ["copy"]


def copy(dest: Any, src: Any, *, thresholds: Optional[Thresholds] = None) -> None:
    """
    Copy every element of `src` into the same position of `dest`.

    `dest` must be at least as long as `src`; positions past len(src) are left
    untouched. Linear time.

    Raises
    ------
    IndexOutOfBounds
        If `src` is longer than `dest` (nothing is copied).
    UnsupportedMutation
        If `dest` rejects `set`.
    """
    dst_seq = as_sequence(dest)
    src_seq = as_sequence(src)
    th = resolve_thresholds(thresholds)
    src_size = src_seq.size()
    if src_size > dst_seq.size():
        raise IndexOutOfBounds(
            f"source of size {src_size} does not fit in destination of size {dst_seq.size()}"
        )

    # Indexed copy needs cheap access on *both* sides.
    if src_size < th.copy or (src_seq.supports_random_access and dst_seq.supports_random_access):
        strategy = INDEX
    elif isinstance(dst_seq, BulkSequence) or isinstance(src_seq, BulkSequence):
        strategy = BUFFER
    else:
        strategy = CURSOR
    logger.debug("copy: size=%d threshold=%d -> %s", src_size, th.copy, strategy)
    if strategy == INDEX:
        for i in range(src_size):
            dst_seq.set(i, src_seq.get(i))
        return

    if isinstance(src_seq, BulkSequence):
        src_seq = ListSequence(src_seq.dump())
    if isinstance(dst_seq, BulkSequence):
        with buffered(dst_seq) as buf:
            _copy_by_cursor(buf, src_seq, src_size)
    else:
        _copy_by_cursor(dst_seq, src_seq, src_size)


def _copy_by_cursor(dst: OrderedSequence[Any], src: OrderedSequence[Any], count: int) -> None:
    di = dst.cursor()
    si = src.cursor()
    for _ in range(count):
        di.next()
        di.set(si.next())
