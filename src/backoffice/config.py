"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to ``default``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    parsed = int(value)
    if parsed <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return parsed


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Backoffice"
    LOG_FILENAME = "backoffice.log"
    DEFAULT_PAGE_SIZE = 25

    def __init__(self) -> None:
        self.DEV_MODE = _env_bool("BACKOFFICE_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.PAGE_SIZE = _env_int("BACKOFFICE_PAGE_SIZE", self.DEFAULT_PAGE_SIZE)
        self.LOG_LEVEL = os.getenv("BACKOFFICE_LOG_LEVEL", "INFO").strip().upper()

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("BACKOFFICE_DATA_DIR", "instance")
        return Path(data_root).expanduser().resolve()


class DevConfig(BaseConfig):
    """Development configuration with diagnostics forced on."""

    DEBUG = True

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True
