import math

import pytest

from segtree import Max, PersistentSegmentTree, Sum, UnknownVersion, Version
from tests.utils import concat_node


def test_old_version_is_unaffected_by_update():
    tree, v0 = PersistentSegmentTree.build([1, 2, 3, 4], Sum())
    v1 = tree.point_update(v0, 1, 10)
    assert tree.query(v0, 0, 4) == 10
    assert tree.query(v1, 0, 4) == 18
    assert tree.to_list(v0) == [1, 2, 3, 4]
    assert tree.to_list(v1) == [1, 10, 3, 4]


def test_versions_are_recorded_in_order():
    tree, v0 = PersistentSegmentTree.build([0, 0, 0], Sum())
    v1 = tree.point_update(v0, 0, 1)
    v2 = tree.point_update(v1, 1, 2)
    assert tree.versions == (v0, v1, v2)
    assert tree.initial_version == v0
    assert tree.latest == v2
    assert [v.number for v in tree.versions] == [0, 1, 2]


def test_branching_from_the_same_base():
    tree, v0 = PersistentSegmentTree.build([1, 1, 1, 1], Sum())
    left = tree.point_update(v0, 0, 5)
    right = tree.point_update(v0, 3, 7)
    assert tree.to_list(left) == [5, 1, 1, 1]
    assert tree.to_list(right) == [1, 1, 1, 7]
    assert tree.to_list(v0) == [1, 1, 1, 1]


def test_update_allocates_one_record_per_level():
    n = 1000
    tree, v0 = PersistentSegmentTree.build(list(range(n)), Sum())
    initial = tree.arena_size
    assert initial == 2 * n - 1
    depth = math.ceil(math.log2(n))
    version = v0
    for k in range(50):
        version = tree.point_update(version, (k * 37) % n, k)
    assert tree.arena_size - initial <= 50 * (depth + 1)


def test_unchanged_subtrees_are_shared():
    tree, v0 = PersistentSegmentTree.build(list(range(8)), Sum())
    v1 = tree.point_update(v0, 0, 100)
    _, right_before = tree._arena.children(v0.root)
    _, right_after = tree._arena.children(v1.root)
    assert right_before == right_after


def test_query_is_idempotent():
    tree, v0 = PersistentSegmentTree.build([4, 8, 15, 16, 23, 42], Max())
    assert tree.query(v0, 1, 5) == tree.query(v0, 1, 5) == 23


def test_non_commutative_order_is_preserved():
    tree, v0 = PersistentSegmentTree.build(list("persist"), concat_node())
    v1 = tree.point_update(v0, 0, "P")
    assert tree.query(v0, 0, 7) == "persist"
    assert tree.query(v1, 0, 4) == "Pers"
    assert tree.query(v1, 3, 3) == ""


def test_lower_bound_per_version():
    tree, v0 = PersistentSegmentTree.build([1, 1, 1, 1, 1], Sum())
    v1 = tree.point_update(v0, 1, 10)
    assert tree.lower_bound(v0, lambda total: total >= 3) == 2
    assert tree.lower_bound(v1, lambda total: total >= 3) == 1
    assert tree.lower_bound(v1, lambda total: total >= 100) == 5


def test_foreign_version_rejected():
    tree, _ = PersistentSegmentTree.build([1, 2], Sum())
    other, other_v0 = PersistentSegmentTree.build([1, 2], Sum())
    with pytest.raises(UnknownVersion):
        tree.query(other_v0, 0, 2)
    with pytest.raises(UnknownVersion):
        tree.query(Version(owner=-1, number=0, root=0), 0, 2)
    with pytest.raises(UnknownVersion):
        tree.query(0, 0, 2)


def test_forged_version_rejected():
    tree, v0 = PersistentSegmentTree.build([1, 2, 3], Sum())
    forged = Version(owner=v0.owner, number=0, root=v0.root + 1)
    with pytest.raises(UnknownVersion):
        tree.point_update(forged, 0, 1)
    with pytest.raises(UnknownVersion):
        tree.query(Version(owner=v0.owner, number=5, root=v0.root), 0, 1)


def test_empty_tree_versions():
    tree, v0 = PersistentSegmentTree.build([], Sum())
    assert tree.query(v0, 0, 0) == 0
    assert tree.to_list(v0) == []
    assert tree.lower_bound(v0, lambda total: True) == 0


def test_with_size_and_from_sequence():
    tree = PersistentSegmentTree.with_size(3, Sum())
    assert tree.to_list(tree.initial_version) == [0, 0, 0]
    tree = PersistentSegmentTree.from_sequence([2, 3], Sum())
    assert tree.query(tree.latest, 0, 2) == 5
    assert "versions=1" in repr(tree)
