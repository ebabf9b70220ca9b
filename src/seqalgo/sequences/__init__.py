"""
Sequences package public API.

Re-export the protocol and the container adapters so callers can write:
    from seqalgo.sequences import OrderedSequence, as_sequence
"""

from .adapters import DequeSequence, ListSequence, ReadOnlySequence, as_sequence
from .protocol import BulkSequence, Comparator, IndexCursor, ListCursor, OrderedSequence

__all__ = [
    "OrderedSequence",
    "ListCursor",
    "BulkSequence",
    "Comparator",
    "IndexCursor",
    "ListSequence",
    "DequeSequence",
    "ReadOnlySequence",
    "as_sequence",
]
