"""Application configuration objects and helpers."""

from __future__ import annotations

import math
import os
from pathlib import Path

from dotenv import load_dotenv

from .models.debt import Strategy

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "DebtPlanner"
    LOG_FILENAME = "debtplanner.log"
    LOG_MAX_BYTES = 10 * 1024 * 1024
    LOG_BACKUP_COUNT = 5
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DEBTPLANNER_DEV_MODE", default=True)
        self.LOG_LEVEL = os.getenv("DEBTPLANNER_LOG_LEVEL", "INFO").strip().upper()
        self.DEFAULT_STRATEGY = Strategy.parse(
            os.getenv("DEBTPLANNER_DEFAULT_STRATEGY", Strategy.AVALANCHE.value)
        )
        self.DEFAULT_EXTRA_PAYMENT = _env_float("DEBTPLANNER_EXTRA_PAYMENT", 0.0)
        if not math.isfinite(self.DEFAULT_EXTRA_PAYMENT) or self.DEFAULT_EXTRA_PAYMENT < 0:
            raise ValueError("DEBTPLANNER_EXTRA_PAYMENT must be a non-negative number.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("DEBTPLANNER_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected locations fall back to user-local storage.
            fallback_path = Path.home() / f".{self.APP_NAME.lower()}"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite."""

    TESTING = True
