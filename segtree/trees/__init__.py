"""The five segment tree variants."""

from .iterative import IterativeSegmentTree
from .lazy import LazySegmentTree
from .lazy_persistent import LazyPersistentSegmentTree
from .persistent import PersistentSegmentTree
from .recursive import RecursiveSegmentTree

__all__ = [
    "IterativeSegmentTree",
    "RecursiveSegmentTree",
    "LazySegmentTree",
    "PersistentSegmentTree",
    "LazyPersistentSegmentTree",
]
