"""counter_py.version — package version and contract identity.

This module exposes:
- __version__: a PEP 440-compliant version string
- CONTRACT_NAME / CONTRACT_VERSION: the identity written to the contract
  version record at instantiate time
- compute_version(): resolution order → env → package metadata → fallback

Environment overrides (first match wins):
- COUNTER_PY_VERSION
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import metadata as importlib_metadata
from typing import Optional

BASE_VERSION = "0.1.0"

CONTRACT_NAME = "crates.io:counter-1-0"


def _pkg_metadata_version(dist_name: str = "counter-py") -> Optional[str]:
    """Try to read installed package version; None if unavailable."""
    try:
        v = importlib_metadata.version(dist_name)
    except importlib_metadata.PackageNotFoundError:
        return None
    return v if v and v != "0.0.0" else None


@lru_cache(maxsize=1)
def compute_version() -> str:
    """
    Resolve a version string with this precedence:
      1) COUNTER_PY_VERSION (exact value)
      2) Installed package metadata version for 'counter-py'
      3) BASE_VERSION
    """
    val = os.getenv("COUNTER_PY_VERSION")
    if val:
        return val

    meta_v = _pkg_metadata_version()
    if meta_v:
        return meta_v

    return BASE_VERSION


__version__ = compute_version()

# The contract version tracks the package version.
CONTRACT_VERSION = __version__

__all__ = [
    "__version__",
    "BASE_VERSION",
    "CONTRACT_NAME",
    "CONTRACT_VERSION",
    "compute_version",
]
