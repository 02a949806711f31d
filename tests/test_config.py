"""Configuration tests driven by DEBTSAGE_* environment variables."""

from __future__ import annotations

from pathlib import Path

import pytest

from debtsage.config import BaseConfig, DevConfig, _env_bool


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("DEBTSAGE_DEV_MODE", "DEBTSAGE_LOG_LEVEL", "DEBTSAGE_CURRENCY", "DEBTSAGE_DEFAULT_STRATEGY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DEBTSAGE_DATA_DIR", str(tmp_path / "data"))


def test_defaults(tmp_path):
    config = BaseConfig()

    assert config.DATA_DIR == (tmp_path / "data").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DEV_MODE is True
    assert config.LOG_LEVEL == "INFO"
    assert config.CURRENCY == "USD"
    assert config.DEFAULT_STRATEGY == "avalanche"
    assert config.log_dir == Path(config.DATA_DIR) / "logs"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEBTSAGE_DEV_MODE", "off")
    monkeypatch.setenv("DEBTSAGE_LOG_LEVEL", "debug")
    monkeypatch.setenv("DEBTSAGE_CURRENCY", "eur")
    monkeypatch.setenv("DEBTSAGE_DEFAULT_STRATEGY", "Snowball")

    config = BaseConfig()

    assert config.DEV_MODE is False
    assert config.LOG_LEVEL == "DEBUG"
    assert config.CURRENCY == "EUR"
    assert config.DEFAULT_STRATEGY == "snowball"


def test_invalid_default_strategy_is_rejected(monkeypatch):
    monkeypatch.setenv("DEBTSAGE_DEFAULT_STRATEGY", "highest-balance")

    with pytest.raises(ValueError, match="DEBTSAGE_DEFAULT_STRATEGY"):
        BaseConfig()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), (" YES ", True), ("on", True), ("0", False), ("no", False), ("", False)],
)
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("DEBTSAGE_FLAG", raw)
    assert _env_bool("DEBTSAGE_FLAG") is expected


def test_env_bool_default(monkeypatch):
    monkeypatch.delenv("DEBTSAGE_FLAG", raising=False)
    assert _env_bool("DEBTSAGE_FLAG", default=True) is True


def test_dev_config_flags():
    config = DevConfig()
    assert config.DEBUG is True
    assert config.TESTING is False
