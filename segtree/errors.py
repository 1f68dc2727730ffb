"""Exceptions raised by the segment tree variants."""

from __future__ import annotations


class SegmentTreeError(Exception):
    """Base class for every error raised by `segtree`."""


class IndexOutOfBounds(SegmentTreeError, IndexError):
    """An index lies outside `[0, n)` or a range endpoint outside `[0, n]`."""


class InvalidRange(SegmentTreeError, ValueError):
    """A range was given with `left > right`."""


class UnknownVersion(SegmentTreeError, LookupError):
    """A version handle was not produced by the tree it was passed to."""
