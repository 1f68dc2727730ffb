"""Ready-made node types.

`Sum`, `Min` and `Max` support lazy "add to every element" range updates.
`Gcd` and `MaxSubarraySum` are plain combinable nodes. `Assign` wraps any
combinable node into a lazy node whose range update overwrites every element.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from segtree.nodes.base import Combinable, power


@dataclass(frozen=True)
class Sum:
    ufunc = np.add

    def combine(self, a: Any, b: Any) -> Any:
        return a + b

    def identity(self) -> Any:
        return 0

    def apply(self, aggregate: Any, update: Any, length: int) -> Any:
        return aggregate + update * length

    def merge_update(self, first: Any, second: Any) -> Any:
        return first + second

    def repeat(self, value: Any, count: int) -> Any:
        return value * count


@dataclass(frozen=True)
class Min:
    ufunc = np.minimum

    def combine(self, a: Any, b: Any) -> Any:
        return a if a <= b else b

    def identity(self) -> Any:
        return math.inf

    def apply(self, aggregate: Any, update: Any, length: int) -> Any:
        return aggregate + update

    def merge_update(self, first: Any, second: Any) -> Any:
        return first + second

    def repeat(self, value: Any, count: int) -> Any:
        return value if count else self.identity()


@dataclass(frozen=True)
class Max:
    ufunc = np.maximum

    def combine(self, a: Any, b: Any) -> Any:
        return a if a >= b else b

    def identity(self) -> Any:
        return -math.inf

    def apply(self, aggregate: Any, update: Any, length: int) -> Any:
        return aggregate + update

    def merge_update(self, first: Any, second: Any) -> Any:
        return first + second

    def repeat(self, value: Any, count: int) -> Any:
        return value if count else self.identity()


@dataclass(frozen=True)
class Gcd:
    ufunc = np.gcd

    def combine(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def identity(self) -> int:
        return 0


@dataclass(frozen=True)
class SubarrayStats:
    best: Any
    prefix: Any
    suffix: Any
    total: Any


@dataclass(frozen=True)
class MaxSubarraySum:
    """Largest sum over non-empty contiguous subarrays.

    Leaves must be lifted with :meth:`leaf`; the answer of a query is the
    ``best`` field of the returned :class:`SubarrayStats`.
    """

    def leaf(self, value: Any) -> SubarrayStats:
        return SubarrayStats(best=value, prefix=value, suffix=value, total=value)

    def combine(self, a: SubarrayStats, b: SubarrayStats) -> SubarrayStats:
        return SubarrayStats(
            best=max(a.best, b.best, a.suffix + b.prefix),
            prefix=max(a.prefix, a.total + b.prefix),
            suffix=max(b.suffix, b.total + a.suffix),
            total=a.total + b.total,
        )

    def identity(self) -> SubarrayStats:
        return SubarrayStats(best=-math.inf, prefix=-math.inf, suffix=-math.inf, total=0)


@dataclass(frozen=True)
class Assign:
    """Lazy node whose range update sets every covered element to one value.

    The update is an aggregate of a single element of `base`, so ``Assign(Min())``
    takes plain numbers and ``Assign(MaxSubarraySum())`` takes ``base.leaf(x)``.
    """

    base: Combinable

    @property
    def ufunc(self) -> Any:
        return getattr(self.base, "ufunc", None)

    def combine(self, a: Any, b: Any) -> Any:
        return self.base.combine(a, b)

    def identity(self) -> Any:
        return self.base.identity()

    def apply(self, aggregate: Any, update: Any, length: int) -> Any:
        repeat = getattr(self.base, "repeat", None)
        if repeat is not None:
            return repeat(update, length)
        return power(self.base, update, length)

    def merge_update(self, first: Any, second: Any) -> Any:
        return second
