"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_STRATEGIES = {"avalanche", "snowball"}


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "DebtSage"
    LOG_FILENAME = "debtsage.log"
    MAX_LOG_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DEBTSAGE_DEV_MODE", default=True)
        self.LOG_LEVEL = os.getenv("DEBTSAGE_LOG_LEVEL", "INFO").strip().upper()
        self.CURRENCY = os.getenv("DEBTSAGE_CURRENCY", "USD").strip().upper()
        self.DEFAULT_STRATEGY = os.getenv("DEBTSAGE_DEFAULT_STRATEGY", "avalanche").strip().lower()
        if self.DEFAULT_STRATEGY not in _STRATEGIES:
            raise ValueError(
                f"DEBTSAGE_DEFAULT_STRATEGY must be one of {sorted(_STRATEGIES)}, "
                f"got {self.DEFAULT_STRATEGY!r}."
            )

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and exports are written."""

        data_root = os.getenv("DEBTSAGE_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def log_dir(self) -> Path:
        return Path(self.DATA_DIR) / "logs"


class DevConfig(BaseConfig):
    """Development configuration with verbose console logging."""

    DEBUG = True
    TESTING = False
