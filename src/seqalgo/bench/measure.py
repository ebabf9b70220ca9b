"""
Timing harness for sequence operations.

We time exactly one call to an operation per sample, using a monotonic
high-resolution clock. Building the input sequence, GC and warmup all happen
outside the timed block, so in-place operations always see fresh input.

Public API (stable):
    time_operation_call(...) -> dict

Returned dict schema:
    {
        "operation": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict

__all__ = ["time_operation_call"]

logger = logging.getLogger(__name__)


def time_operation_call(
    *,
    op_name: str,
    op_fn: Callable[[Any], Any],
    make_input: Callable[[], Any],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated calls to `op_fn(make_input())`.

    Parameters
    ----------
    op_name : str
        Logical name of the operation (for logs/records).
    op_fn : Callable[[sequence], Any]
        The operation, already bound to its other arguments.
    make_input : Callable[[], sequence]
        Builds a fresh input for each sample; called outside the timed block.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A slower sample is kept, the status becomes
        "timeout" and sampling stops.

    Returns
    -------
    dict
        See module docstring for exact schema.

    Errors raised by the operation are recorded (status "error"), not raised,
    so one failing operation cannot abort a whole sweep.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "operation": op_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            op_fn(make_input())
        except Exception as e:
            logger.warning("%s: warmup failed: %r", op_name, e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = make_input()
            try:
                t0 = time.perf_counter_ns()
                op_fn(arg)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.warning("%s: failed at repeat %d: %r", op_name, r, e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
