from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Combinable(Protocol):
    """Capability every segment tree variant is generic over.

    `combine` must be associative but need not be commutative: the left
    operand always covers the elements before those of the right operand.
    `identity` returns the neutral element of `combine`.
    """

    def combine(self, a: Any, b: Any) -> Any:
        ...

    def identity(self) -> Any:
        ...


@runtime_checkable
class LazyCombinable(Combinable, Protocol):
    """Combinable node that also supports deferred range updates.

    `apply(aggregate, update, length)` returns the aggregate of `length`
    elements after `update` was applied to each of them.
    `merge_update(first, second)` returns a single update equivalent to
    applying `first` and then `second`. `None` marks "no pending update" and
    is never passed to either method.
    """

    def apply(self, aggregate: Any, update: Any, length: int) -> Any:
        ...

    def merge_update(self, first: Any, second: Any) -> Any:
        ...


@dataclass(frozen=True)
class Monoid:
    """Adapter building a `Combinable` out of a plain binary function.

    Parameters
    ----------
    operation:
        Associative binary function, e.g. ``operator.add``.
    neutral:
        Neutral element of `operation`, e.g. ``0`` for addition.
    ufunc:
        Optional numpy ufunc equivalent to `operation`, used to vectorise
        construction over numeric leaves.
    """

    operation: Callable[[Any, Any], Any]
    neutral: Any
    ufunc: Any = None

    def combine(self, a: Any, b: Any) -> Any:
        return self.operation(a, b)

    def identity(self) -> Any:
        return self.neutral


def fold(node: Combinable, values: Iterable[Any]) -> Any:
    """Left-to-right `combine` of `values`, `identity()` when empty."""

    acc = node.identity()
    for value in values:
        acc = node.combine(acc, value)
    return acc


def power(node: Combinable, value: Any, count: int) -> Any:
    """Combine `count` copies of `value` using O(log count) combines."""

    if count < 0:
        raise ValueError("count must be non-negative")
    result = node.identity()
    base = value
    while count:
        if count & 1:
            result = node.combine(result, base)
        count >>= 1
        if count:
            base = node.combine(base, base)
    return result


def is_lazy(node: Any) -> bool:
    return isinstance(node, LazyCombinable)


def require_combinable(node: Any) -> Combinable:
    if not isinstance(node, Combinable):
        raise TypeError(f"{type(node).__name__} does not provide combine() and identity()")
    return node


def require_lazy(node: Any, *, owner: Optional[str] = None) -> LazyCombinable:
    require_combinable(node)
    if not is_lazy(node):
        where = f" by {owner}" if owner else ""
        raise TypeError(
            f"{type(node).__name__} must provide apply() and merge_update() to be used{where}"
        )
    return node
