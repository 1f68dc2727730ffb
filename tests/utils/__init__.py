"""Shared test utilities for segtree."""

from .reference import (
    Affine,
    ReferenceArray,
    concat_node,
)

__all__ = ["Affine", "ReferenceArray", "concat_node"]
