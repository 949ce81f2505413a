# src/review_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the concrete SQLite store into a Session.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.ports import TaskRepo
from ..core.session import Session
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_store(settings: Settings | None = None) -> TaskStore:
    if settings is None:
        settings = get_settings()
    _ensure_local_dirs(settings)
    return TaskStore(settings.tasks_db_path)


def create_session(settings=None, *, store: TaskRepo | None = None) -> Session:
    """
    Create a Session over the active todos.

    Keeping settings and the store injectable makes the app easier to test and
    avoids hidden global state. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if store is None:
        store = create_store(settings)

    return Session.load(
        store,
        retention=settings.retention,
        content_width=settings.content_width,
    )
