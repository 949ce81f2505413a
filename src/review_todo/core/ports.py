# src/review_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The session depends on a Protocol instead of the concrete SQLite store.
This keeps storage swappable and makes testing easier.
"""

from datetime import datetime, timedelta
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    Persistence contract required by the session.

    All calls are synchronous and are not retried by the caller. Failures are
    reported by raising; the session logs any exception and carries on.
    """

    def load_active(self) -> list[Task]: ...

    def insert_task(self, task: Task) -> int: ...

    def update_task(self, task: Task) -> int: ...

    def prune_terminal_older_than(
            self,
            retention: timedelta,
            *,
            now: datetime | None = None,
    ) -> int: ...
