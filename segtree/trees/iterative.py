from __future__ import annotations

from typing import Any, Iterable, List

from segtree.core.bounds import check_index, check_range
from segtree.core.heap import build_heap, next_power_of_two
from segtree.logging import get_logger
from segtree.nodes.base import Combinable, require_combinable

LOGGER = get_logger(__name__)


class IterativeSegmentTree:
    """Bottom-up segment tree with point updates and range queries.

    Both operations walk between a leaf and the root without recursion.
    Queries keep the left and right partial aggregates apart so the node's
    `combine` never sees its operands out of order.
    """

    def __init__(self, node: Combinable, values: Iterable[Any] = ()) -> None:
        self.node = require_combinable(node)
        leaves = list(values)
        self._length = len(leaves)
        self._size = next_power_of_two(self._length)
        self._nodes: List[Any] = build_heap(self.node, leaves, self._size)
        LOGGER.debug("Built iterative tree over %d values (%d slots)", self._length, len(self._nodes))

    @classmethod
    def from_sequence(cls, values: Iterable[Any], node: Combinable) -> "IterativeSegmentTree":
        return cls(node, values)

    @classmethod
    def with_size(cls, n: int, node: Combinable) -> "IterativeSegmentTree":
        if n < 0:
            raise ValueError("n must be non-negative")
        node = require_combinable(node)
        return cls(node, [node.identity()] * n)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> Any:
        return self._nodes[self._size + check_index(index, self._length)]

    def point_update(self, index: int, value: Any) -> None:
        i = self._size + check_index(index, self._length)
        nodes = self._nodes
        combine = self.node.combine
        nodes[i] = value
        i >>= 1
        while i:
            nodes[i] = combine(nodes[2 * i], nodes[2 * i + 1])
            i >>= 1

    def query(self, left: int, right: int) -> Any:
        """Aggregate of the values in `[left, right)`."""

        lo, hi = check_range(left, right, self._length)
        nodes = self._nodes
        combine = self.node.combine
        acc_left = self.node.identity()
        acc_right = self.node.identity()
        lo += self._size
        hi += self._size
        while lo < hi:
            if lo & 1:
                acc_left = combine(acc_left, nodes[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                acc_right = combine(nodes[hi], acc_right)
            lo >>= 1
            hi >>= 1
        return combine(acc_left, acc_right)

    def to_list(self) -> List[Any]:
        return self._nodes[self._size : self._size + self._length]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(node={self.node!r}, values={self.to_list()!r})"
