from __future__ import annotations

from typing import Any, Iterable, List

from segtree.core.bounds import check_range
from segtree.nodes.base import LazyCombinable, require_lazy
from segtree.trees.recursive import RecursiveSegmentTree


class LazySegmentTree(RecursiveSegmentTree):
    """Recursive segment tree with deferred range updates.

    Every internal node carries a pending update that has already been
    applied to its own aggregate but not yet to its children's. The pending
    update is pushed one level down, and cleared, before the recursion reads
    or writes the children.
    """

    node: LazyCombinable

    def __init__(self, node: LazyCombinable, values: Iterable[Any] = ()) -> None:
        super().__init__(node, values)
        self._pending: List[Any] = [None] * self._size

    def _check_node(self, node: Any) -> LazyCombinable:
        return require_lazy(node, owner=type(self).__name__)

    def _apply(self, index: int, update: Any, length: int) -> None:
        self._nodes[index] = self.node.apply(self._nodes[index], update, length)
        if index < self._size:
            pending = self._pending[index]
            self._pending[index] = update if pending is None else self.node.merge_update(pending, update)

    def _push(self, index: int, lo: int, hi: int) -> None:
        update = self._pending[index]
        if update is None:
            return
        half = (hi - lo) // 2
        self._apply(2 * index, update, half)
        self._apply(2 * index + 1, update, half)
        self._pending[index] = None

    def range_update(self, left: int, right: int, update: Any) -> None:
        """Apply `update` to every element of `[left, right)`."""

        lo, hi = check_range(left, right, self._length)
        if update is None:
            raise ValueError("None is reserved for 'no pending update'")
        if lo == hi:
            return
        self._range_update(1, 0, self._size, lo, hi, update)

    def _range_update(self, index: int, lo: int, hi: int, left: int, right: int, update: Any) -> None:
        if right <= lo or hi <= left:
            return
        if left <= lo and hi <= right:
            self._apply(index, update, hi - lo)
            return
        self._push(index, lo, hi)
        mid = (lo + hi) // 2
        self._range_update(2 * index, lo, mid, left, right, update)
        self._range_update(2 * index + 1, mid, hi, left, right, update)
        self._pull(index)
