from __future__ import annotations

from typing import Any, Tuple

from segtree.core.arena import NO_CHILD, Version
from segtree.core.bounds import check_range
from segtree.nodes.base import LazyCombinable, require_lazy
from segtree.trees.persistent import PersistentSegmentTree


class LazyPersistentSegmentTree(PersistentSegmentTree):
    """Persistent segment tree with deferred range updates.

    A record's pending update is already folded into its own aggregate and
    is newer than anything stored below it. Writes never touch a shared
    child: pushing a pending update allocates fresh child records that only
    the new version links to. Reads never push at all; the pending updates
    met on the way down are composed and applied to the aggregates that are
    returned, so queries allocate nothing.
    """

    node: LazyCombinable

    def _check_node(self, node: Any) -> LazyCombinable:
        return require_lazy(node, owner=type(self).__name__)

    def _compose(self, first: Any, second: Any) -> Any:
        if first is None:
            return second
        if second is None:
            return first
        return self.node.merge_update(first, second)

    def _effective(self, index: int, carry: Any, length: int) -> Any:
        value = self._arena.value(index)
        if carry is None:
            return value
        return self.node.apply(value, carry, length)

    def _carry_below(self, index: int, carry: Any) -> Any:
        return self._compose(self._arena.pending(index), carry)

    def _with_update(self, index: int, update: Any, length: int) -> int:
        """Allocate a copy of record `index` with `update` applied."""

        arena = self._arena
        value = self.node.apply(arena.value(index), update, length)
        left, right = arena.children(index)
        if left == NO_CHILD:
            return arena.alloc(value)
        return arena.alloc(value, left, right, self._compose(arena.pending(index), update))

    def _children_for_write(self, index: int, lo: int, hi: int) -> Tuple[int, int]:
        left, right = self._arena.children(index)
        update = self._arena.pending(index)
        if update is None:
            return left, right
        mid = (lo + hi) // 2
        return self._with_update(left, update, mid - lo), self._with_update(right, update, hi - mid)

    def range_update(self, version: Version, left: int, right: int, update: Any) -> Version:
        """Return a new version equal to `version` with `update` applied to `[left, right)`."""

        root = self._resolve(version)
        lo, hi = check_range(left, right, self._length)
        if update is None:
            raise ValueError("None is reserved for 'no pending update'")
        if lo == hi:
            return self._commit(root)
        return self._commit(self._range_update(root, 0, self._length, lo, hi, update))

    def _range_update(self, index: int, lo: int, hi: int, left: int, right: int, update: Any) -> int:
        if right <= lo or hi <= left:
            return index
        if left <= lo and hi <= right:
            return self._with_update(index, update, hi - lo)
        left_child, right_child = self._children_for_write(index, lo, hi)
        mid = (lo + hi) // 2
        left_child = self._range_update(left_child, lo, mid, left, right, update)
        right_child = self._range_update(right_child, mid, hi, left, right, update)
        return self._alloc_parent(left_child, right_child)
