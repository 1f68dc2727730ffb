import math

import pytest

from segtree import Gcd, IterativeSegmentTree, Max, Min, Sum
from tests.utils import concat_node


def test_build_and_query_sum():
    tree = IterativeSegmentTree.from_sequence([5, 1, 4, 2, 3], Sum())
    assert len(tree) == 5
    assert tree.query(0, 5) == 15
    assert tree.query(1, 4) == 7
    assert tree.query(4, 5) == 3


def test_query_min_over_every_suffix():
    tree = IterativeSegmentTree.from_sequence(list(range(11)), Min())
    for i in range(10):
        assert tree.query(i, 11) == i


def test_empty_range_returns_identity():
    tree = IterativeSegmentTree.from_sequence([3, 1, 2], Max())
    assert tree.query(2, 2) == -math.inf
    assert tree.query(0, 0) == -math.inf


def test_point_update_propagates_to_root():
    tree = IterativeSegmentTree.from_sequence(list(range(11)), Min())
    tree.point_update(0, 20)
    assert tree.query(0, 1) == 20
    assert tree.query(0, 11) == 1
    assert tree[0] == 20


def test_with_size_is_seeded_with_identity():
    tree = IterativeSegmentTree.with_size(6, Gcd())
    assert tree.to_list() == [0] * 6
    tree.point_update(2, 12)
    tree.point_update(5, 18)
    assert tree.query(0, 6) == 6
    assert tree.query(3, 6) == 18


def test_non_commutative_order_is_preserved():
    tree = IterativeSegmentTree.from_sequence(list("abcdefg"), concat_node())
    for left in range(8):
        for right in range(left, 8):
            assert tree.query(left, right) == "abcdefg"[left:right]
    tree.point_update(3, "X")
    assert tree.query(0, 7) == "abcXefg"


def test_empty_tree():
    tree = IterativeSegmentTree.from_sequence([], Sum())
    assert len(tree) == 0
    assert tree.query(0, 0) == 0
    assert tree.to_list() == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        IterativeSegmentTree.with_size(-1, Sum())


def test_repr_lists_values():
    tree = IterativeSegmentTree.from_sequence([1, 2], Sum())
    assert "values=[1, 2]" in repr(tree)
