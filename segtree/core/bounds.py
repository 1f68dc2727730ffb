from __future__ import annotations

import operator
from typing import Any, Tuple

from segtree.errors import IndexOutOfBounds, InvalidRange


def check_index(index: Any, length: int) -> int:
    """Return `index` as an int, raising unless it lies in `[0, length)`."""

    position = operator.index(index)
    if not 0 <= position < length:
        raise IndexOutOfBounds(f"Index {position} out of bounds for length {length}")
    return position


def check_range(left: Any, right: Any, length: int) -> Tuple[int, int]:
    """Validate the half-open range `[left, right)` against `length`."""

    lo = operator.index(left)
    hi = operator.index(right)
    if not 0 <= lo <= length or not 0 <= hi <= length:
        raise IndexOutOfBounds(f"Range [{lo}, {hi}) out of bounds for length {length}")
    if lo > hi:
        raise InvalidRange(f"Range [{lo}, {hi}) has left > right")
    return lo, hi
