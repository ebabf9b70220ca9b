"""
seqalgo: stateless algorithms over ordered sequences.

    >>> import seqalgo
    >>> animals = ["dog", "cat"]
    >>> seqalgo.sort(animals)
    >>> animals
    ['cat', 'dog']
    >>> seqalgo.binary_search(animals, "fish")
    -3
"""

import logging

from .algorithms import (
    binary_search,
    copy,
    fill,
    maximum,
    minimum,
    replace_all,
    reverse,
    rotate,
    shuffle,
    sort,
    swap,
)
from .config import DEFAULT_THRESHOLDS, Thresholds, load_thresholds
from .errors import (
    ConfigError,
    EmptyInput,
    IllegalCursorState,
    IndexOutOfBounds,
    InvalidArgument,
    SeqAlgoError,
    TypeMismatch,
    UnsupportedMutation,
)
from .random_source import RandomSource, as_random_source, default_random_source
from .sequences import (
    BulkSequence,
    Comparator,
    DequeSequence,
    ListCursor,
    ListSequence,
    OrderedSequence,
    ReadOnlySequence,
    as_sequence,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "sort",
    "binary_search",
    "reverse",
    "shuffle",
    "swap",
    "fill",
    "minimum",
    "maximum",
    "rotate",
    "copy",
    "replace_all",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "load_thresholds",
    "SeqAlgoError",
    "TypeMismatch",
    "UnsupportedMutation",
    "IndexOutOfBounds",
    "EmptyInput",
    "InvalidArgument",
    "IllegalCursorState",
    "ConfigError",
    "RandomSource",
    "as_random_source",
    "default_random_source",
    "OrderedSequence",
    "ListCursor",
    "BulkSequence",
    "Comparator",
    "ListSequence",
    "DequeSequence",
    "ReadOnlySequence",
    "as_sequence",
]
