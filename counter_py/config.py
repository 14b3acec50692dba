"""
counter_py.config — runtime defaults, CLI paths and storage caps.

This module centralizes configuration for the counter contract and its CLI.
It has NO third-party deps and is safe to import very early.

Configuration precedence:
  1) Environment variables (COUNTER_PY_*)
  2) Hardcoded safe defaults below

Key env vars:
  - COUNTER_PY_DEFAULT_HRP            (str)    default: juno
  - COUNTER_PY_STATE_FILE             (path)   default: unset (in-memory)
  - COUNTER_PY_LOG_LEVEL              (str)    default: WARNING
  - COUNTER_PY_MAX_STORAGE_KEY_BYTES  (int)    default: 64
  - COUNTER_PY_MAX_STORAGE_VAL_BYTES  (int)    default: 4096

Usage:
    from counter_py.config import load_config
    CFG = load_config()
    if CFG.state_file: ...

Tests that tweak the environment must call ``load_config.cache_clear()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ----------------------------- helpers ---------------------------------------


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int, *, min_v: int, max_v: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw, 0)
    except ValueError:
        return default
    if v < min_v:
        return min_v
    if v > max_v:
        return max_v
    return v


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if not raw:
        return None
    return Path(raw).expanduser().resolve()


def _env_log_level(name: str, default: str) -> str:
    val = _env_str(name, default).upper()
    return val if val in _LOG_LEVELS else default


# ------------------------------- config --------------------------------------


@dataclass(frozen=True)
class CounterConfig:
    default_hrp: str
    state_file: Optional[Path]
    log_level: str
    max_storage_key_bytes: int
    max_storage_value_bytes: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "default_hrp": self.default_hrp,
            "state_file": str(self.state_file) if self.state_file else None,
            "log_level": self.log_level,
            "max_storage_key_bytes": self.max_storage_key_bytes,
            "max_storage_value_bytes": self.max_storage_value_bytes,
        }


@lru_cache(maxsize=1)
def load_config() -> CounterConfig:
    """
    Build and cache a CounterConfig from environment + safe defaults.
    """
    return CounterConfig(
        default_hrp=_env_str("COUNTER_PY_DEFAULT_HRP", "juno"),
        state_file=_env_path("COUNTER_PY_STATE_FILE"),
        log_level=_env_log_level("COUNTER_PY_LOG_LEVEL", "WARNING"),
        max_storage_key_bytes=_env_int("COUNTER_PY_MAX_STORAGE_KEY_BYTES", 64, min_v=1, max_v=256),
        max_storage_value_bytes=_env_int(
            "COUNTER_PY_MAX_STORAGE_VAL_BYTES", 4096, min_v=32, max_v=1_048_576
        ),
    )


__all__ = ["CounterConfig", "load_config"]
