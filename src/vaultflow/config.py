"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

_THIRTY_DAYS = 30 * 24 * 60 * 60


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "VaultFlow"
    DB_FILENAME = "vaultflow.db"
    TOKEN_SALT = "vaultflow-auth"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.DEV_MODE = _env_bool("VAULTFLOW_DEV_MODE", default=True)
        self.SECRET_KEY = os.getenv("VAULTFLOW_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DATABASE_URL = os.getenv("VAULTFLOW_DATABASE_URL", self._build_sqlite_url())
        self.TOKEN_MAX_AGE = _env_int("VAULTFLOW_TOKEN_MAX_AGE", _THIRTY_DAYS)
        self.PORT = _env_int("PORT", 3000)
        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("VAULTFLOW_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("VAULTFLOW_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {"pool_pre_ping": True}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite's Flask client."""

    TESTING = True
