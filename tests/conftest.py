"""
Shared fixtures.

Inserts the project `src/` onto sys.path so tests run without installing the
package, and provides `RecordingSequence`, an OrderedSequence over a list that
logs every positional access and cursor it hands out. Tests use it to check
which traversal strategy an algorithm picked.
"""

from __future__ import annotations

import pathlib
import sys
from typing import Any, List, Tuple

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from seqalgo.sequences import IndexCursor  # noqa: E402


class RecordingSequence:
    """List-backed sequence recording ("get"|"set"|"cursor", index) events."""

    def __init__(self, values: List[Any], *, random_access: bool) -> None:
        self.values = list(values)
        self.supports_random_access = random_access
        self.events: List[Tuple[str, int]] = []
        self._in_cursor = 0

    def size(self) -> int:
        return len(self.values)

    def get(self, index: int) -> Any:
        if not self._in_cursor:
            self.events.append(("get", index))
        return self.values[index]

    def set(self, index: int, value: Any) -> Any:
        if not self._in_cursor:
            self.events.append(("set", index))
        previous = self.values[index]
        self.values[index] = value
        return previous

    def cursor(self, index: int = 0) -> "_RecordingCursor":
        self.events.append(("cursor", index))
        return _RecordingCursor(self, index)

    def kinds(self) -> set:
        return {kind for kind, _ in self.events}


class _RecordingCursor(IndexCursor):
    """Cursor whose element accesses are not logged as positional get/set."""

    def __init__(self, seq: RecordingSequence, index: int) -> None:
        super().__init__(seq, index)
        self._rec = seq

    def _quiet(self, fn, *args):
        self._rec._in_cursor += 1
        try:
            return fn(*args)
        finally:
            self._rec._in_cursor -= 1

    def next(self) -> Any:
        return self._quiet(super().next)

    def previous(self) -> Any:
        return self._quiet(super().previous)

    def set(self, value: Any) -> None:
        self._quiet(super().set, value)


@pytest.fixture
def animals() -> List[str]:
    return ["dog", "cat"]


@pytest.fixture
def recording():
    """Factory: recording(values, random_access=False) -> RecordingSequence."""

    def make(values: List[Any], random_access: bool = False) -> RecordingSequence:
        return RecordingSequence(values, random_access=random_access)

    return make
