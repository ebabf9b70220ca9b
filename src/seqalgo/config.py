"""
Tuning parameters for the dual-strategy algorithms.

Several algorithms have two implementations: one driven by indexed
`get`/`set`, one driven by a cursor walking the sequence. The index path is
taken when the sequence reports `supports_random_access`, or when it is
"small", i.e. its size is below the operation's threshold. The defaults were
measured on linked structures; rerun a sweep (`seqalgo.bench.run_sweep`) to
check them on other sequential containers.

Public API (stable):
    Thresholds
    DEFAULT_THRESHOLDS
    resolve_thresholds(thresholds: Thresholds | None) -> Thresholds
    thresholds_from_mapping(data: dict) -> Thresholds
    load_thresholds(path) -> Thresholds

YAML format (every key optional, unknown keys rejected):

    binary_search: 5000
    reverse: 5
    shuffle: 5
    fill: 5
    rotate: 5
    copy: 5
    replace_all: 5
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from seqalgo.errors import ConfigError

__all__ = [
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "resolve_thresholds",
    "thresholds_from_mapping",
    "load_thresholds",
]


@dataclass(frozen=True)
class Thresholds:
    binary_search: int = 5000
    reverse: int = 5
    shuffle: int = 5
    fill: int = 5
    rotate: int = 5
    copy: int = 5
    replace_all: int = 5

    def as_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_THRESHOLDS = Thresholds()


def resolve_thresholds(thresholds: Optional[Thresholds]) -> Thresholds:
    if thresholds is None:
        return DEFAULT_THRESHOLDS
    if not isinstance(thresholds, Thresholds):
        raise ConfigError(
            f"thresholds must be a Thresholds instance; got {type(thresholds).__name__}"
        )
    return thresholds


def thresholds_from_mapping(data: Optional[Mapping[str, Any]]) -> Thresholds:
    """
    Build `Thresholds` from a plain mapping, starting from the defaults.

    Raises
    ------
    ConfigError
        On unknown keys or values that are not positive integers.
    """
    if data is None:
        return DEFAULT_THRESHOLDS
    if not isinstance(data, Mapping):
        raise ConfigError("thresholds must be a mapping of name -> int")

    known = {f.name for f in fields(Thresholds)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown threshold keys: {unknown}. Known: {sorted(known)}")

    values: Dict[str, int] = {}
    for name, raw in data.items():
        # bool is an int subclass; reject it explicitly
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ConfigError(f"threshold {name!r} must be an integer; got {raw!r}")
        if raw < 1:
            raise ConfigError(f"threshold {name!r} must be >= 1; got {raw}")
        values[name] = raw
    return replace(DEFAULT_THRESHOLDS, **values)


def load_thresholds(path: Union[str, Path]) -> Thresholds:
    """Read thresholds from a YAML file. An empty file yields the defaults."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Thresholds file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Thresholds file is not valid YAML: {path}: {e}") from e
    return thresholds_from_mapping(data)
