from __future__ import annotations

from typing import Any, Callable, Iterable, List

from segtree.core.bounds import check_index, check_range
from segtree.core.heap import build_heap, next_power_of_two
from segtree.logging import get_logger
from segtree.nodes.base import Combinable, require_combinable

LOGGER = get_logger(__name__)


class RecursiveSegmentTree:
    """Top-down segment tree over a perfect binary heap.

    The root covers `[0, size)` where `size` is the smallest power of two
    holding all values, and every node splits its range at the midpoint.
    Subclasses hook into the descent through :meth:`_push`, which runs before
    any node's children are read or written.
    """

    def __init__(self, node: Combinable, values: Iterable[Any] = ()) -> None:
        self.node = self._check_node(node)
        leaves = list(values)
        self._length = len(leaves)
        self._size = next_power_of_two(self._length)
        self._nodes: List[Any] = build_heap(self.node, leaves, self._size)
        LOGGER.debug(
            "Built %s over %d values (%d slots)",
            type(self).__name__,
            self._length,
            len(self._nodes),
        )

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

    def _push(self, index: int, lo: int, hi: int) -> None:
        pass

    def _pull(self, index: int) -> None:
        self._nodes[index] = self.node.combine(self._nodes[2 * index], self._nodes[2 * index + 1])

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> Any:
        position = check_index(index, self._length)
        return self.query(position, position + 1)

    def query(self, left: int, right: int) -> Any:
        """Aggregate of the values in `[left, right)`."""

        lo, hi = check_range(left, right, self._length)
        if lo == hi:
            return self.node.identity()
        return self._query(1, 0, self._size, lo, hi)

    def _query(self, index: int, lo: int, hi: int, left: int, right: int) -> Any:
        if right <= lo or hi <= left:
            return self.node.identity()
        if left <= lo and hi <= right:
            return self._nodes[index]
        self._push(index, lo, hi)
        mid = (lo + hi) // 2
        return self.node.combine(
            self._query(2 * index, lo, mid, left, right),
            self._query(2 * index + 1, mid, hi, left, right),
        )

    def point_update(self, index: int, value: Any) -> None:
        position = check_index(index, self._length)
        self._assign(1, 0, self._size, position, value)

    def _assign(self, index: int, lo: int, hi: int, position: int, value: Any) -> None:
        if hi - lo == 1:
            self._nodes[index] = value
            return
        self._push(index, lo, hi)
        mid = (lo + hi) // 2
        if position < mid:
            self._assign(2 * index, lo, mid, position, value)
        else:
            self._assign(2 * index + 1, mid, hi, position, value)
        self._pull(index)

    def lower_bound(self, predicate: Callable[[Any], bool]) -> int:
        """Smallest `i` with ``predicate(query(0, i + 1))``, or ``len(self)``.

        `predicate` must be monotone over prefixes: once it holds for a
        prefix it holds for every longer one.
        """

        if self._length == 0 or not predicate(self._nodes[1]):
            return self._length
        combine = self.node.combine
        acc = self.node.identity()
        index, lo, hi = 1, 0, self._size
        while hi - lo > 1:
            self._push(index, lo, hi)
            mid = (lo + hi) // 2
            candidate = combine(acc, self._nodes[2 * index])
            if predicate(candidate):
                index, hi = 2 * index, mid
            else:
                acc = candidate
                index, lo = 2 * index + 1, mid
        return lo

    def to_list(self) -> List[Any]:
        out: List[Any] = []
        if self._length:
            self._collect(1, 0, self._size, out)
        return out

    def _collect(self, index: int, lo: int, hi: int, out: List[Any]) -> None:
        if lo >= self._length:
            return
        if hi - lo == 1:
            out.append(self._nodes[index])
            return
        self._push(index, lo, hi)
        mid = (lo + hi) // 2
        self._collect(2 * index, lo, mid, out)
        self._collect(2 * index + 1, mid, hi, out)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(node={self.node!r}, values={self.to_list()!r})"
