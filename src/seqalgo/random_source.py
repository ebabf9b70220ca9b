"""
Randomness sources for `shuffle`.

A `RandomSource` needs a single method, `next_int(bound)`, returning a
uniformly distributed integer in [0, bound). Callers usually pass a seeded
`numpy.random.Generator` (or a `random.Random`); `as_random_source` wraps
either.

When no source is given, `shuffle` falls back to `default_random_source()`:
one process-wide numpy Generator, created on first use under a lock and
reused for every later default shuffle. Creation is thread-safe; *drawing*
from it is not (numpy Generators are not safe to share across threads), so
concurrent callers should pass their own source.
"""

from __future__ import annotations

import random
import threading
from typing import Any, Optional, Protocol, runtime_checkable

import numpy as np

from seqalgo.errors import InvalidArgument

__all__ = [
    "RandomSource",
    "GeneratorSource",
    "StdlibSource",
    "as_random_source",
    "default_random_source",
]


@runtime_checkable
class RandomSource(Protocol):
    def next_int(self, bound: int) -> int: ...


class GeneratorSource:
    """`RandomSource` backed by a `numpy.random.Generator`."""

    def __init__(self, rng: np.random.Generator) -> None:
        self.rng = rng

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        # Generator.integers is half-open [low, high)
        return int(self.rng.integers(0, bound))


class StdlibSource:
    """`RandomSource` backed by a `random.Random`."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        return self.rng.randrange(bound)


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise InvalidArgument(f"bound must be positive; got {bound}")


def as_random_source(obj: Any) -> RandomSource:
    if obj is None:
        raise InvalidArgument("random source must not be None")
    if isinstance(obj, np.random.Generator):
        return GeneratorSource(obj)
    if isinstance(obj, random.Random):
        return StdlibSource(obj)
    if isinstance(obj, RandomSource):
        return obj
    raise InvalidArgument(
        "random source must be a RandomSource, numpy.random.Generator or "
        f"random.Random; got {type(obj).__name__}"
    )


_default_source: Optional[GeneratorSource] = None
_default_lock = threading.Lock()


def default_random_source() -> RandomSource:
    global _default_source
    if _default_source is None:
        with _default_lock:
            if _default_source is None:
                _default_source = GeneratorSource(np.random.default_rng())
    return _default_source
