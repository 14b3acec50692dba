from __future__ import annotations

from counter_py.config import load_config
from counter_py.version import BASE_VERSION, CONTRACT_NAME, compute_version


def test_defaults(monkeypatch) -> None:
    for name in (
        "COUNTER_PY_DEFAULT_HRP",
        "COUNTER_PY_STATE_FILE",
        "COUNTER_PY_LOG_LEVEL",
        "COUNTER_PY_MAX_STORAGE_KEY_BYTES",
        "COUNTER_PY_MAX_STORAGE_VAL_BYTES",
    ):
        monkeypatch.delenv(name, raising=False)
    cfg = load_config()
    assert cfg.as_dict() == {
        "default_hrp": "juno",
        "state_file": None,
        "log_level": "WARNING",
        "max_storage_key_bytes": 64,
        "max_storage_value_bytes": 4096,
    }


def test_env_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("COUNTER_PY_DEFAULT_HRP", " cosmos ")
    monkeypatch.setenv("COUNTER_PY_STATE_FILE", str(tmp_path / "s.json"))
    monkeypatch.setenv("COUNTER_PY_LOG_LEVEL", "debug")
    monkeypatch.setenv("COUNTER_PY_MAX_STORAGE_KEY_BYTES", "0x20")
    cfg = load_config()
    assert cfg.default_hrp == "cosmos"
    assert cfg.state_file == (tmp_path / "s.json").resolve()
    assert cfg.log_level == "DEBUG"
    assert cfg.max_storage_key_bytes == 32


def test_bad_values_fall_back_or_clamp(monkeypatch) -> None:
    monkeypatch.setenv("COUNTER_PY_LOG_LEVEL", "chatty")
    monkeypatch.setenv("COUNTER_PY_MAX_STORAGE_KEY_BYTES", "lots")
    monkeypatch.setenv("COUNTER_PY_MAX_STORAGE_VAL_BYTES", "1")
    cfg = load_config()
    assert cfg.log_level == "WARNING"
    assert cfg.max_storage_key_bytes == 64
    assert cfg.max_storage_value_bytes == 32


def test_config_is_cached() -> None:
    assert load_config() is load_config()


def test_version_env_override(monkeypatch) -> None:
    monkeypatch.setenv("COUNTER_PY_VERSION", "9.9.9")
    compute_version.cache_clear()
    try:
        assert compute_version() == "9.9.9"
    finally:
        monkeypatch.delenv("COUNTER_PY_VERSION")
        compute_version.cache_clear()
    assert compute_version()
    assert BASE_VERSION.count(".") == 2
    assert CONTRACT_NAME == "crates.io:counter-1-0"
