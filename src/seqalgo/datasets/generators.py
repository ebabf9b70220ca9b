"""
Input generators for tests and threshold sweeps.

Distributions (`spec["dist"]`):
- "random":        integers uniform over params["range"] = [lo, hi] (inclusive).
- "sorted":        the "random" draw, sorted ascending (binary_search input).
- "nearly_sorted": [0, 1, ..., n-1] degraded by ceil(swap_frac * n) random
                   index swaps (params["swap_frac"], default 0.05).
- "few_uniques":   at most params["k"] distinct values drawn from an optional
                   inclusive params["range"] (default [0, 4294967295]), then
                   sampled with replacement to length n.
- "small_range":   like "random" on a small domain; params["min_val"] /
                   params["max_val"] (default 0 / 255) or params["range"].
- "reversed":      [n-1, ..., 0]; params and rng unused.

Public API (stable):
    SUPPORTED_DISTS
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    Tagged
    make_tagged(keys: Iterable) -> list[Tagged]

All randomness comes from the caller's Generator, so a seeded Generator makes
every dataset reproducible. Returned lists hold plain Python ints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Tuple

import numpy as np

from seqalgo.errors import ConfigError

__all__ = ["SUPPORTED_DISTS", "make_dataset", "Tagged", "make_tagged"]

_DEFAULT_FEW_UNIQUES_RANGE = (0, 4294967295)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset of length `n` according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}; see the module docstring.
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Raises
    ------
    ConfigError
        If `n`, the distribution name or its params are invalid.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ConfigError("n must be an int")
    if n < 0:
        raise ConfigError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ConfigError("dataset spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist)  # type: ignore[arg-type]
    if gen is None:
        raise ConfigError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ConfigError(f"{dist}.params must be a dict")
    return gen(n, params, rng)


# ------------------------- distributions ------------------------- #


def _gen_random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    lo, hi = _parse_range(params, "random")
    if n == 0:
        return []
    # integers() is half-open; +1 makes hi inclusive
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _gen_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return sorted(_gen_random(n, params, rng))


def _gen_nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_swap_frac(params)
    arr = list(range(n))
    num_swaps = int(np.ceil(swap_frac * n))
    if num_swaps <= 0:
        return arr
    idxs = rng.integers(0, n, size=2 * num_swaps)
    for k in range(num_swaps):
        i, j = int(idxs[2 * k]), int(idxs[2 * k + 1])
        # i == j is a no-op, so the effective swap count may be lower
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _gen_few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ConfigError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    if "range" in params:
        lo, hi = _parse_range(params, "few_uniques")
    else:
        lo, hi = _DEFAULT_FEW_UNIQUES_RANGE
    if n == 0:
        return []

    actual_k = int(min(k, n, hi - lo + 1))
    # Draw distinct values from `rng` (not the random module) to stay reproducible.
    chosen: List[int] = []
    seen = set()
    while len(chosen) < actual_k:
        need = actual_k - len(chosen)
        for v in map(int, rng.integers(lo, hi + 1, size=need * 2)):
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == actual_k:
                    break
    return [chosen[int(t)] for t in rng.integers(0, actual_k, size=n)]


def _gen_small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _parse_range(params, "small_range")
    else:
        lo, hi = params.get("min_val", 0), params.get("max_val", 255)
        if not _is_int_like(lo) or not _is_int_like(hi):
            raise ConfigError("small_range params.min_val/max_val must be integers")
        lo, hi = int(lo), int(hi)
        if lo > hi:
            raise ConfigError(f"small_range invalid: min > max ({lo} > {hi})")
    if n == 0:
        return []
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _gen_reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "random": _gen_random,
    "sorted": _gen_sorted,
    "nearly_sorted": _gen_nearly_sorted,
    "few_uniques": _gen_few_uniques,
    "small_range": _gen_small_range,
    "reversed": _gen_reversed,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- tagged records ------------------------- #


@dataclass(frozen=True)
class Tagged:
    """
    A record ordered by `key` alone. `tag` is carried along untouched, so two
    records with equal keys compare as neither-less-than-the-other while
    remaining distinguishable: exactly what a stability check needs.
    """

    key: Any
    tag: int

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Tagged):
            return NotImplemented
        return self.key < other.key


def make_tagged(keys: Iterable[Any]) -> List[Tagged]:
    """Wrap each key with its input position as tag."""
    return [Tagged(key, i) for i, key in enumerate(keys)]


# ------------------------- helpers ------------------------- #


def _parse_range(params: Dict[str, Any], dist: str) -> Tuple[int, int]:
    if "range" not in params:
        raise ConfigError(f"{dist}.params.range must be provided as [min, max] (inclusive)")
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ConfigError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ConfigError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ConfigError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not 0.0 <= x <= 1.0:
        raise ConfigError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer scalars, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
