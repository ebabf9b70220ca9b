"""
Datasets package public API.

Re-export the generators so callers can write:
    from seqalgo.datasets import make_dataset, make_tagged, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, Tagged, make_dataset, make_tagged

__all__ = ["make_dataset", "SUPPORTED_DISTS", "Tagged", "make_tagged"]
