"""
Error taxonomy for seqalgo.

Every error derives from `SeqAlgoError` and from the builtin exception a
Python caller would reach for first, so both of these work:

    except seqalgo.EmptyInput: ...
    except ValueError: ...

Public API (stable):
    SeqAlgoError
    TypeMismatch          (TypeError)   elements / key not mutually comparable
    UnsupportedMutation   (TypeError)   sequence rejects element replacement
    IndexOutOfBounds      (IndexError)  index outside [0, size)
    EmptyInput            (ValueError)  min / max of an empty collection
    InvalidArgument       (ValueError)  missing or unusable argument
    IllegalCursorState    (RuntimeError) cursor.set() before next()/previous()
    ConfigError           (ValueError)  invalid thresholds or sweep config
"""

from __future__ import annotations

__all__ = [
    "SeqAlgoError",
    "TypeMismatch",
    "UnsupportedMutation",
    "IndexOutOfBounds",
    "EmptyInput",
    "InvalidArgument",
    "IllegalCursorState",
    "ConfigError",
]


class SeqAlgoError(Exception):
    """Base class for every error raised by this package."""


class TypeMismatch(SeqAlgoError, TypeError):
    pass


class UnsupportedMutation(SeqAlgoError, TypeError):
    pass


class IndexOutOfBounds(SeqAlgoError, IndexError):
    pass


class EmptyInput(SeqAlgoError, ValueError):
    pass


class InvalidArgument(SeqAlgoError, ValueError):
    pass


class IllegalCursorState(SeqAlgoError, RuntimeError):
    pass


class ConfigError(SeqAlgoError, ValueError):
    pass
