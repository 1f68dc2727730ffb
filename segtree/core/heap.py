"""Perfect binary heap layout shared by the array-backed variants.

Node 1 is the root, node `i` has children `2i` and `2i + 1`, and the
`size` leaves occupy `[size, 2 * size)`. `size` is the smallest power of two
holding every value; leaves past the last value hold the node's identity.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import numpy as np

from segtree import config as st_config
from segtree.logging import get_logger
from segtree.nodes.base import Combinable

LOGGER = get_logger(__name__)

_VECTOR_DTYPES = (np.dtype(np.int64), np.dtype(np.float64))
_INT64_HEADROOM = float(2**62)


def next_power_of_two(n: int) -> int:
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def _vectorised_heap(node: Combinable, values: Sequence[Any], size: int) -> Optional[List[Any]]:
    ufunc = getattr(node, "ufunc", None)
    if ufunc is None or not values:
        return None
    if set(map(type, values)) not in ({int}, {float}):
        return None
    identity = node.identity()
    try:
        raw = np.asarray(values)
        padded = np.asarray(list(values) + [identity] * (size - len(values)))
    except (TypeError, ValueError, OverflowError):
        return None
    if padded.ndim != 1 or padded.dtype not in _VECTOR_DTYPES or raw.dtype != padded.dtype:
        return None
    if padded.dtype.kind == "f" and np.isnan(padded).any():
        return None
    if ufunc is np.add and padded.dtype.kind == "i":
        if float(np.abs(padded.astype(np.float64)).max()) * size >= _INT64_HEADROOM:
            return None

    heap = np.zeros(2 * size, dtype=padded.dtype)
    heap[size:] = padded
    hi = size
    while hi > 1:
        lo = hi // 2
        heap[lo:hi] = ufunc(heap[2 * lo : 2 * hi : 2], heap[2 * lo + 1 : 2 * hi : 2])
        hi = lo
    nodes = heap.tolist()
    nodes[0] = identity
    nodes[size + len(values) :] = [identity] * (size - len(values))
    return nodes


def build_heap(node: Combinable, values: Sequence[Any], size: int) -> List[Any]:
    """Return the heap array of length `2 * size` aggregating `values`."""

    if len(values) > size:
        raise ValueError(f"{len(values)} values do not fit in {size} leaves")
    if st_config.runtime_config().vectorize:
        nodes = _vectorised_heap(node, values, size)
        if nodes is not None:
            LOGGER.debug("Vectorised build of %d leaves with %s", size, type(node).__name__)
            return nodes

    identity = node.identity()
    nodes = [identity] * (2 * size)
    nodes[size : size + len(values)] = values
    for i in range(size - 1, 0, -1):
        nodes[i] = node.combine(nodes[2 * i], nodes[2 * i + 1])
    return nodes
