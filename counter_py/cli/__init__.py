"""
counter_py.cli
--------------

Command-line entrypoints for the counter contract tools.

This package groups small CLIs that are exposed by console scripts:
  - `counter-py-address`  -> counter_py.cli.address:main   (encode / decode)
  - `counter-py-run`      -> counter_py.cli.run:main       (instantiate / execute / query / schema)

To avoid import-time overhead, CLI modules are lazy-loaded via `resolve_entrypoint`.
"""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Callable, Dict, Optional

from counter_py.config import load_config

ENTRYPOINTS: Dict[str, str] = {
    "address": "counter_py.cli.address:main",
    "run": "counter_py.cli.run:main",
}


def resolve_entrypoint(name: str) -> Callable[..., int]:
    """
    Resolve a CLI name to its `main()` callable without importing all submodules.

    Raises KeyError if `name` is not a known entrypoint.
    """
    target = ENTRYPOINTS[name]
    module_path, _, attr = target.partition(":")
    module = import_module(module_path)
    main_fn = getattr(module, attr)
    if not callable(main_fn):
        raise AttributeError(f"Entrypoint {target!r} is not callable")
    return main_fn


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for CLI runs (level from arg, else COUNTER_PY_LOG_LEVEL)."""
    lvl = (level or load_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, lvl, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


__all__ = ["ENTRYPOINTS", "resolve_entrypoint", "setup_logging"]
