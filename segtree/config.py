from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _bool_from_env(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _normalise_log_level(value: str | None) -> str:
    if value is None:
        return "INFO"
    value = value.strip().upper()
    if value not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(f"Unsupported log level '{value}'. Expected one of {_SUPPORTED_LOG_LEVELS}.")
    return value


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: str
    vectorize: bool
    arena_capacity: int | None

    @property
    def initial_arena_capacity(self) -> int:
        if self.arena_capacity is None or self.arena_capacity < 1:
            return 16
        return self.arena_capacity


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("segtree")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    log_level = _normalise_log_level(os.getenv("SEGTREE_LOG_LEVEL"))
    vectorize = _bool_from_env(os.getenv("SEGTREE_VECTORIZE"), default=True)
    arena_capacity = _parse_optional_int(os.getenv("SEGTREE_ARENA_CAPACITY"))

    config = RuntimeConfig(
        log_level=log_level,
        vectorize=vectorize,
        arena_capacity=arena_capacity,
    )
    _configure_logging(config.log_level)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
