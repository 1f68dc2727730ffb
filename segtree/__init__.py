"""segtree: generic segment trees over pluggable combinable nodes.

Quick Start
-----------
>>> from segtree import LazySegmentTree, PersistentSegmentTree, Sum
>>>
>>> # Range add, range sum
>>> tree = LazySegmentTree.with_size(8, Sum())
>>> tree.range_update(2, 5, 3)
>>> tree.query(0, 8)
9
>>>
>>> # Every update yields a new version; old versions stay queryable
>>> tree, v0 = PersistentSegmentTree.build([1, 2, 3, 4], Sum())
>>> v1 = tree.point_update(v0, 1, 10)
>>> tree.query(v0, 0, 4), tree.query(v1, 0, 4)
(10, 18)

Classes
-------
IterativeSegmentTree : Bottom-up tree, point update and range query.
RecursiveSegmentTree : Top-down tree, adds prefix search.
LazySegmentTree : Recursive tree with deferred range updates.
PersistentSegmentTree : Versioned tree sharing unchanged subtrees.
LazyPersistentSegmentTree : Versioned tree with deferred range updates.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("segtree")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.1.0"

from .config import RuntimeConfig, reset_runtime_config_cache, runtime_config
from .core import NodeArena, Version
from .errors import IndexOutOfBounds, InvalidRange, SegmentTreeError, UnknownVersion
from .logging import get_logger
from .nodes import (
    Assign,
    Combinable,
    Gcd,
    LazyCombinable,
    Max,
    MaxSubarraySum,
    Min,
    Monoid,
    SubarrayStats,
    Sum,
    fold,
    power,
)
from .trees import (
    IterativeSegmentTree,
    LazyPersistentSegmentTree,
    LazySegmentTree,
    PersistentSegmentTree,
    RecursiveSegmentTree,
)

__all__ = [
    "__version__",
    # Trees
    "IterativeSegmentTree",
    "RecursiveSegmentTree",
    "LazySegmentTree",
    "PersistentSegmentTree",
    "LazyPersistentSegmentTree",
    "Version",
    "NodeArena",
    # Nodes
    "Combinable",
    "LazyCombinable",
    "Monoid",
    "fold",
    "power",
    "Sum",
    "Min",
    "Max",
    "Gcd",
    "MaxSubarraySum",
    "SubarrayStats",
    "Assign",
    # Errors
    "SegmentTreeError",
    "IndexOutOfBounds",
    "InvalidRange",
    "UnknownVersion",
    # Runtime
    "RuntimeConfig",
    "runtime_config",
    "reset_runtime_config_cache",
    "get_logger",
]
