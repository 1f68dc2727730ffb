"""Node contracts and the bundled node types."""

from .base import (
    Combinable,
    LazyCombinable,
    Monoid,
    fold,
    is_lazy,
    power,
    require_combinable,
    require_lazy,
)
from .default import Assign, Gcd, Max, MaxSubarraySum, Min, SubarrayStats, Sum

__all__ = [
    "Combinable",
    "LazyCombinable",
    "Monoid",
    "fold",
    "is_lazy",
    "power",
    "require_combinable",
    "require_lazy",
    "Assign",
    "Gcd",
    "Max",
    "MaxSubarraySum",
    "Min",
    "SubarrayStats",
    "Sum",
]
