"""
Algorithms package public API.

Every operation takes an `OrderedSequence` or a plain Python sequence and
works in place (except the searches and reductions, which only read):

    sort, binary_search, reverse, shuffle, swap, fill,
    minimum, maximum, rotate, copy, replace_all
"""

from .copying import copy
from .extrema import maximum, minimum
from .fill import fill
from .mergesort import merge_sort
from .replace import replace_all
from .reverse import reverse
from .rotate import rotate
from .search import binary_search
from .shuffle import shuffle
from .sort import sort
from .swap import swap

__all__ = [
    "sort",
    "merge_sort",
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
]
