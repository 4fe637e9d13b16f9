# src/taskbox/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read from the environment until get_settings() is first called.
- Storage backend and location are configurable without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOX"

STORAGE_BACKENDS = ("sqlite", "json", "memory")

_DEFAULT_STORAGE_FILES = {
    "sqlite": "storage.sqlite3",
    "json": "storage.json",
    "memory": "",
}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data ----
    data_dir: Path

    # ---- Storage ----
    storage_backend: str
    storage_path: Path | None
    storage_key: str
    restore_on_start: bool

    # ---- Connector flags ----
    console_enabled: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskbox")
        log_level = _env(_k("LOG_LEVEL"), "INFO").upper()

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskbox"))

        storage_backend = _env(_k("STORAGE"), "sqlite").lower()
        default_file = _DEFAULT_STORAGE_FILES.get(storage_backend, "")
        storage_path: Path | None = _env_path(
            _k("STORAGE_PATH"), data_dir / default_file if default_file else Path()
        )
        if storage_backend == "memory":
            storage_path = None

        storage_key = _env(_k("STORAGE_KEY"), "tasks")
        restore_on_start = _env_bool(_k("RESTORE_ON_START"), True)
        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            restore_on_start=restore_on_start,
            console_enabled=console_enabled,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading .env on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS


def reset_settings() -> None:
    """Forget cached settings (next get_settings() re-reads the environment)."""
    global _SETTINGS
    _SETTINGS = None
