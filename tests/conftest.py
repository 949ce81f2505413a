# tests/conftest.py

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from types import SimpleNamespace

import pytest

from review_todo.core.session import Session
from review_todo.tasks.task_store import TaskStore

from .fakes import FakeClock, FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="review-todo-test",
        log_level="DEBUG",
        log_to_console=False,
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "todos.sqlite3",
        retention_days=7,
        retention=timedelta(days=7),
        content_width=30,
        char_limit=280,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def session(repo: FakeTaskRepo, clock: FakeClock) -> Session:
    return Session(repo, clock=clock)


@pytest.fixture()
def store(tmp_path: Path) -> TaskStore:
    """Real SQLite store: its correctness is part of what we want to test."""
    return TaskStore(tmp_path / "todos.sqlite3")
