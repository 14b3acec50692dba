"""
Shared pytest setup.

- Registers Hypothesis profiles ("dev" locally, "ci" when CI is set; override
  with HYPOTHESIS_PROFILE).
- Clears the cached counter_py config around every test so monkeypatched
  COUNTER_PY_* variables take effect.
"""
from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, settings

from counter_py.config import load_config

settings.register_profile(
    "dev",
    settings(max_examples=100, deadline=None, suppress_health_check=(HealthCheck.too_slow,)),
)
settings.register_profile(
    "ci",
    settings(max_examples=300, deadline=None, derandomize=True, suppress_health_check=(HealthCheck.too_slow,)),
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE") or ("ci" if os.getenv("CI") else "dev"))


def pytest_configure(config):
    config.addinivalue_line("markers", "cli: exercises a console entrypoint in-process")


@pytest.fixture(autouse=True)
def _fresh_config():
    load_config.cache_clear()
    yield
    load_config.cache_clear()
