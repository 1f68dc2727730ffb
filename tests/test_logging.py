import logging

import pytest

from segtree import PersistentSegmentTree, Sum
from segtree import config as st_config
from segtree.logging import get_logger


def test_logger_respects_runtime_level(fresh_runtime: pytest.MonkeyPatch):
    fresh_runtime.setenv("SEGTREE_LOG_LEVEL", "DEBUG")
    st_config.reset_runtime_config_cache()

    logger = get_logger("tests.logging")

    assert logger.level == logging.DEBUG
    assert logger.name == "segtree.tests.logging"


def test_root_logger_name(fresh_runtime: pytest.MonkeyPatch):
    assert get_logger().name == "segtree"


def test_version_commits_are_logged(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger="segtree.trees.persistent")

    tree, v0 = PersistentSegmentTree.build([1, 2, 3], Sum())
    tree.point_update(v0, 0, 5)

    assert "Committed version 0" in caplog.text
    assert "Committed version 1" in caplog.text


def test_module_names_are_used_as_is(fresh_runtime: pytest.MonkeyPatch):
    assert get_logger("segtree.trees.persistent").name == "segtree.trees.persistent"
    assert get_logger("segtree").name == "segtree"
