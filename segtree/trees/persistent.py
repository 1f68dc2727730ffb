from __future__ import annotations

import itertools
from typing import Any, Callable, Iterable, List, Sequence, Tuple

from segtree import config as st_config
from segtree.core.arena import NO_CHILD, NodeArena, Version
from segtree.core.bounds import check_index, check_range
from segtree.errors import UnknownVersion
from segtree.logging import get_logger
from segtree.nodes.base import Combinable, require_combinable

LOGGER = get_logger(__name__)

_TREE_IDS = itertools.count()


class PersistentSegmentTree:
    """Segment tree that keeps every version it has ever produced.

    Records live in an append-only :class:`NodeArena`. An update copies the
    records on one root-to-leaf path and links the copies to the untouched
    siblings, so every version costs O(log n) new records and earlier
    versions keep answering queries exactly as before.

    Branching is allowed: any version may be updated, any number of times.
    Updates deriving from the same base are not merged; each returns its own
    independent version.
    """

    def __init__(self, node: Combinable, values: Iterable[Any] = ()) -> None:
        self.node = self._check_node(node)
        leaves = list(values)
        self._length = len(leaves)
        self._owner = next(_TREE_IDS)
        self._arena = NodeArena(max(2 * self._length, st_config.runtime_config().initial_arena_capacity))
        self._versions: List[Version] = []
        root = self._build(leaves, 0, self._length) if leaves else NO_CHILD
        self._commit(root)

    @classmethod
    def build(cls, values: Iterable[Any], node: Combinable) -> Tuple["PersistentSegmentTree", Version]:
        """Construct a tree and return it along with its initial version."""

        tree = cls(node, values)
        return tree, tree.initial_version

    @classmethod
    def from_sequence(cls, values: Iterable[Any], node: Combinable):
        return cls(node, values)

    @classmethod
    def with_size(cls, n: int, node: Combinable):
        if n < 0:
            raise ValueError("n must be non-negative")
        node = require_combinable(node)
        return cls(node, [node.identity()] * n)

    def _check_node(self, node: Any) -> Combinable:
        return require_combinable(node)

    def _build(self, leaves: Sequence[Any], lo: int, hi: int) -> int:
        if hi - lo == 1:
            return self._arena.alloc(leaves[lo])
        mid = (lo + hi) // 2
        left = self._build(leaves, lo, mid)
        right = self._build(leaves, mid, hi)
        return self._alloc_parent(left, right)

    def _alloc_parent(self, left: int, right: int) -> int:
        arena = self._arena
        return arena.alloc(self.node.combine(arena.value(left), arena.value(right)), left, right)

    def _commit(self, root: int) -> Version:
        version = Version(owner=self._owner, number=len(self._versions), root=root)
        self._versions.append(version)
        LOGGER.debug(
            "Committed version %d (root %d, %d arena records)",
            version.number,
            root,
            len(self._arena),
        )
        return version

    def _resolve(self, version: Any) -> int:
        if (
            not isinstance(version, Version)
            or version.owner != self._owner
            or not 0 <= version.number < len(self._versions)
            or self._versions[version.number] != version
        ):
            raise UnknownVersion(f"{version!r} was not produced by this tree")
        return version.root

    def __len__(self) -> int:
        return self._length

    @property
    def initial_version(self) -> Version:
        return self._versions[0]

    @property
    def latest(self) -> Version:
        return self._versions[-1]

    @property
    def versions(self) -> Tuple[Version, ...]:
        return tuple(self._versions)

    @property
    def arena_size(self) -> int:
        return len(self._arena)

    # Hooks letting the lazy subclass carry deferred updates down a read-only descent.

    def _effective(self, index: int, carry: Any, length: int) -> Any:
        return self._arena.value(index)

    def _carry_below(self, index: int, carry: Any) -> Any:
        return None

    def _children_for_write(self, index: int, lo: int, hi: int) -> Tuple[int, int]:
        return self._arena.children(index)

    def query(self, version: Version, left: int, right: int) -> Any:
        """Aggregate of `[left, right)` as of `version`."""

        root = self._resolve(version)
        lo, hi = check_range(left, right, self._length)
        if lo == hi:
            return self.node.identity()
        return self._query(root, 0, self._length, lo, hi, None)

    def _query(self, index: int, lo: int, hi: int, left: int, right: int, carry: Any) -> Any:
        if right <= lo or hi <= left:
            return self.node.identity()
        if left <= lo and hi <= right:
            return self._effective(index, carry, hi - lo)
        below = self._carry_below(index, carry)
        left_child, right_child = self._arena.children(index)
        mid = (lo + hi) // 2
        return self.node.combine(
            self._query(left_child, lo, mid, left, right, below),
            self._query(right_child, mid, hi, left, right, below),
        )

    def point_update(self, version: Version, index: int, value: Any) -> Version:
        """Return a new version equal to `version` with element `index` set to `value`."""

        root = self._resolve(version)
        position = check_index(index, self._length)
        return self._commit(self._assign(root, 0, self._length, position, value))

    def _assign(self, index: int, lo: int, hi: int, position: int, value: Any) -> int:
        if hi - lo == 1:
            return self._arena.alloc(value)
        left, right = self._children_for_write(index, lo, hi)
        mid = (lo + hi) // 2
        if position < mid:
            left = self._assign(left, lo, mid, position, value)
        else:
            right = self._assign(right, mid, hi, position, value)
        return self._alloc_parent(left, right)

    def lower_bound(self, version: Version, predicate: Callable[[Any], bool]) -> int:
        """Smallest `i` with ``predicate(query(version, 0, i + 1))``, or ``len(self)``."""

        root = self._resolve(version)
        if self._length == 0 or not predicate(self._effective(root, None, self._length)):
            return self._length
        combine = self.node.combine
        acc = self.node.identity()
        index, lo, hi, carry = root, 0, self._length, None
        while hi - lo > 1:
            below = self._carry_below(index, carry)
            left_child, right_child = self._arena.children(index)
            mid = (lo + hi) // 2
            candidate = combine(acc, self._effective(left_child, below, mid - lo))
            if predicate(candidate):
                index, hi = left_child, mid
            else:
                acc = candidate
                index, lo = right_child, mid
            carry = below
        return lo

    def to_list(self, version: Version) -> List[Any]:
        root = self._resolve(version)
        out: List[Any] = []
        if self._length:
            self._collect(root, 0, self._length, None, out)
        return out

    def _collect(self, index: int, lo: int, hi: int, carry: Any, out: List[Any]) -> None:
        if hi - lo == 1:
            out.append(self._effective(index, carry, 1))
            return
        below = self._carry_below(index, carry)
        left_child, right_child = self._arena.children(index)
        mid = (lo + hi) // 2
        self._collect(left_child, lo, mid, below, out)
        self._collect(right_child, mid, hi, below, out)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(node={self.node!r}, length={self._length}, "
            f"versions={len(self._versions)}, arena_size={len(self._arena)})"
        )
