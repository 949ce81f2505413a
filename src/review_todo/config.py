# src/review_todo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read from disk at import time except an optional local .env.
- Every value has a sane default so the tracker runs with zero configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "REVIEW_TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int, *, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


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
    log_to_console: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    # ---- Behaviour ----
    retention_days: int
    content_width: int
    char_limit: int

    @property
    def retention(self) -> timedelta:
        return timedelta(days=self.retention_days)

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "review-todo").strip() or "review-todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        # The TUI owns the terminal; console logs would garble it.
        log_to_console = _env_bool(_k("LOG_TO_CONSOLE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/review_todo"))
        tasks_db_path = _env_path(_k("DB_PATH"), data_dir / "todos.sqlite3")

        retention_days = _env_int(_k("RETENTION_DAYS"), 7, minimum=0)
        content_width = _env_int(_k("CONTENT_WIDTH"), 30, minimum=1)
        char_limit = _env_int(_k("CHAR_LIMIT"), 280, minimum=1)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_console=log_to_console,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            retention_days=retention_days,
            content_width=content_width,
            char_limit=char_limit,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
