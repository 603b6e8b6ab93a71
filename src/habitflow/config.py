"""Application configuration read from the environment (and an optional ``.env``)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "HABITFLOW_"
TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


def _user_data_root() -> Path:
    local = os.getenv("LOCALAPPDATA")
    return Path(local) if local else Path.home() / ".local" / "share"


class BaseConfig:
    """Settings shared by every run of the tracker.

    ``DATA_DIR`` holds the SQLite file and the ``logs`` folder. A database URL
    given explicitly must still be SQLite; the tracker keeps all state local.
    """

    APP_NAME = "HabitFlow"
    DB_FILENAME = "habitflow.db"
    DEFAULT_DATA_DIR = "instance"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool(f"{ENV_PREFIX}DEV_MODE", default=True)
        self.DATABASE_URL = _env("DATABASE_URL") or f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"
        if not self.DATABASE_URL.startswith("sqlite"):
            raise ValueError(f"{ENV_PREFIX}DATABASE_URL must point at a local SQLite file.")

    def _resolve_data_dir(self) -> Path:
        requested = Path(_env("DATA_DIR", self.DEFAULT_DATA_DIR)).expanduser()
        for candidate in (requested, _user_data_root() / self.APP_NAME):
            try:
                candidate = candidate.resolve()
                candidate.mkdir(parents=True, exist_ok=True)
            except PermissionError:
                continue
            return candidate
        raise PermissionError(f"No writable data directory for {self.APP_NAME}")

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        # Flet callbacks run on worker threads
        return {"connect_args": {"check_same_thread": False}}


class DevConfig(BaseConfig):
    """Configuration with dev diagnostics forced on."""

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True
