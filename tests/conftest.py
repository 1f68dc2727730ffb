import pytest

from segtree import config as st_config


@pytest.fixture
def fresh_runtime(monkeypatch: pytest.MonkeyPatch):
    """Reset the cached runtime config before and after the test."""

    for key in ["SEGTREE_LOG_LEVEL", "SEGTREE_VECTORIZE", "SEGTREE_ARENA_CAPACITY"]:
        monkeypatch.delenv(key, raising=False)
    st_config.reset_runtime_config_cache()
    yield monkeypatch
    monkeypatch.undo()
    st_config.reset_runtime_config_cache()
