# tests/test_config.py

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest

from review_todo.config import Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "LOG_TO_CONSOLE",
    "DATA_DIR",
    "DB_PATH",
    "RETENTION_DAYS",
    "CONTENT_WIDTH",
    "CHAR_LIMIT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(f"REVIEW_TODO_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env(load_env_file=False)
    assert s.app_name == "review-todo"
    assert s.log_level == "INFO"
    assert s.log_to_console is False
    assert s.data_dir == Path(".local/review_todo")
    assert s.tasks_db_path == Path(".local/review_todo/todos.sqlite3")
    assert s.retention == timedelta(days=7)
    assert s.content_width == 30
    assert s.char_limit == 280


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("REVIEW_TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("REVIEW_TODO_RETENTION_DAYS", "3")
    monkeypatch.setenv("REVIEW_TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("REVIEW_TODO_LOG_TO_CONSOLE", "yes")

    s = Settings.from_env(load_env_file=False)
    assert s.tasks_db_path == tmp_path / "todos.sqlite3"
    assert s.retention == timedelta(days=3)
    assert s.log_level == "DEBUG"
    assert s.log_to_console is True


def test_invalid_numbers_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVIEW_TODO_CONTENT_WIDTH", "wide")
    monkeypatch.setenv("REVIEW_TODO_CHAR_LIMIT", "0")
    monkeypatch.setenv("REVIEW_TODO_RETENTION_DAYS", "-1")

    s = Settings.from_env(load_env_file=False)
    assert s.content_width == 30
    assert s.char_limit == 280
    assert s.retention_days == 7


def test_explicit_db_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("REVIEW_TODO_DB_PATH", str(tmp_path / "x.db"))
    assert Settings.from_env(load_env_file=False).tasks_db_path == tmp_path / "x.db"
