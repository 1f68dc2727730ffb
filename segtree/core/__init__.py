"""Storage primitives shared by the segment tree variants."""

from .arena import NO_CHILD, NodeArena, Version
from .bounds import check_index, check_range
from .heap import build_heap, next_power_of_two

__all__ = [
    "NO_CHILD",
    "NodeArena",
    "Version",
    "check_index",
    "check_range",
    "build_heap",
    "next_power_of_two",
]
