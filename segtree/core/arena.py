from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

import numpy as np

from segtree import config as st_config

NO_CHILD = -1


@dataclass(frozen=True)
class Version:
    """Opaque handle naming one immutable snapshot of a persistent tree."""

    owner: int
    number: int
    root: int


class NodeArena:
    """Append-only store of immutable node records.

    Child links live in two growable ``int64`` columns (``NO_CHILD`` for
    leaves); aggregates and pending updates live in Python lists since they
    hold arbitrary values. Records are never overwritten or relocated, so an
    index handed out once stays valid for the life of the arena.
    """

    __slots__ = ("_left", "_right", "_values", "_pending")

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is None:
            capacity = st_config.runtime_config().initial_arena_capacity
        capacity = max(int(capacity), 1)
        self._left = np.full(capacity, NO_CHILD, dtype=np.int64)
        self._right = np.full(capacity, NO_CHILD, dtype=np.int64)
        self._values: List[Any] = []
        self._pending: List[Any] = []

    def __len__(self) -> int:
        return len(self._values)

    @property
    def capacity(self) -> int:
        return int(self._left.shape[0])

    def _grow(self) -> None:
        capacity = self.capacity * 2
        left = np.full(capacity, NO_CHILD, dtype=np.int64)
        right = np.full(capacity, NO_CHILD, dtype=np.int64)
        left[: self.capacity] = self._left
        right[: self.capacity] = self._right
        self._left = left
        self._right = right

    def alloc(
        self,
        value: Any,
        left: int = NO_CHILD,
        right: int = NO_CHILD,
        pending: Any = None,
    ) -> int:
        index = len(self._values)
        if index == self.capacity:
            self._grow()
        self._left[index] = left
        self._right[index] = right
        self._values.append(value)
        self._pending.append(pending)
        return index

    def value(self, index: int) -> Any:
        return self._values[index]

    def pending(self, index: int) -> Any:
        return self._pending[index]

    def children(self, index: int) -> tuple[int, int]:
        return int(self._left[index]), int(self._right[index])

    def is_leaf(self, index: int) -> bool:
        return int(self._left[index]) == NO_CHILD
