# src/day_planner/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "PLANNER"

STORAGE_BACKENDS = ("json", "sqlite")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    json_dir: Path
    sqlite_path: Path

    # ---- Calendar views ----
    locale: str
    preview_limit: int
    preview_width: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "planner") or "planner"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/planner"))
        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "json")
        json_dir = _env_path(_k("JSON_DIR"), data_dir / "store")
        sqlite_path = _env_path(_k("SQLITE_PATH"), data_dir / "planner.sqlite3")

        locale = _env(_k("LOCALE"), "pt-BR").strip() or "pt-BR"
        preview_limit = max(0, _env_int(_k("PREVIEW_LIMIT"), 3))
        preview_width = max(1, _env_int(_k("PREVIEW_WIDTH"), 24))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            json_dir=json_dir,
            sqlite_path=sqlite_path,
            locale=locale,
            preview_limit=preview_limit,
            preview_width=preview_width,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
