"""Loggers for the `segtree` namespace, levelled from `RuntimeConfig`."""

from __future__ import annotations

import logging
from typing import Optional

from . import config as st_config

_ROOT = "segtree"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the logger for `name`, usually a module's ``__name__``.

    Names outside the ``segtree`` namespace are nested under it, so
    ``get_logger("bench")`` yields ``segtree.bench``.
    """

    if not name or name == _ROOT:
        logger_name = _ROOT
    elif name.startswith(_ROOT + "."):
        logger_name = name
    else:
        logger_name = f"{_ROOT}.{name}"
    logger = logging.getLogger(logger_name)
    logger.setLevel(st_config.runtime_config().log_level)
    return logger
