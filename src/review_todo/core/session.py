# src/review_todo/core/session.py

"""
Interactive session state.

The session owns the active todo list, the focus mode and the selected index.
It is the only place that mutates them: every user command is applied here to
completion (including its synchronous persistence call) before the next one.
Renderers only read `display_lines()` / `selected` / `focus`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from enum import StrEnum

from ..tasks.lifecycle import advance
from ..tasks.task_models import Task
from .ports import TaskRepo

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

UP = -1
DOWN = 1

DEFAULT_RETENTION = timedelta(days=7)


class Focus(StrEnum):
    NAVIGATE = "navigate"  # arrow keys move the selection
    INPUT = "input"  # keystrokes go to the text box


class Session:
    def __init__(
        self,
        repo: TaskRepo,
        tasks: Iterable[Task] | None = None,
        *,
        clock: Clock = datetime.now,
        retention: timedelta = DEFAULT_RETENTION,
        content_width: int = 30,
    ) -> None:
        self._repo = repo
        self._tasks: list[Task] = list(tasks or [])
        self._clock = clock
        self._retention = retention
        self._content_width = content_width
        self._closed = False

        self.focus = Focus.INPUT
        self.selected = 0

    @classmethod
    def load(cls, repo: TaskRepo, **kwargs) -> Session:
        """Build a session over everything the store still considers active."""
        tasks = repo.load_active()
        logger.info("Session loaded %d active todos", len(tasks))
        return cls(repo, tasks, **kwargs)

    # ---- read-only views ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def selected_task(self) -> Task | None:
        if self.focus is not Focus.NAVIGATE:
            return None
        if 0 <= self.selected < len(self._tasks):
            return self._tasks[self.selected]
        return None

    def display_lines(self) -> list[str]:
        return [t.display_line(self._content_width) for t in self._tasks]

    # ---- commands ----

    def toggle_focus(self) -> Focus:
        if self.focus is Focus.INPUT:
            self.focus = Focus.NAVIGATE
            self._clamp_selection()
        else:
            self.focus = Focus.INPUT
        logger.debug("Focus -> %s (selected=%d)", self.focus.value, self.selected)
        return self.focus

    def move_selection(self, direction: int) -> bool:
        """Move the selection one step up (UP) or down (DOWN). Returns True if it moved."""
        if self.focus is not Focus.NAVIGATE or not self._tasks:
            return False

        step = UP if direction < 0 else DOWN
        target = self.selected + step
        if target < 0 or target > len(self._tasks) - 1:
            return False
        self.selected = target
        return True

    def submit_text(self, content: str) -> Task | None:
        """
        Create a todo from `content` and persist it.

        The todo only joins the in-memory list once the insert succeeded.
        Returns the new todo, or None when nothing was added.
        """
        if self.focus is not Focus.INPUT:
            return None

        try:
            task = Task.new(content, self._clock())
        except ValueError:
            logger.debug("Ignoring blank submission.")
            return None

        try:
            self._repo.insert_task(task)
        except Exception:
            logger.exception("Failed to save todo %r", task.content)
            return None

        self._tasks.append(task)
        logger.info("Todo added id=%s total=%d", task.id, len(self._tasks))
        return task

    def advance_selected(self) -> Task | None:
        """
        Escalate the selected todo one status.

        A positive delay moves the deadline to now + delay; a zero delay keeps it.
        Reaching the terminal status stamps the completion instant as the deadline
        (retention is counted from it) and drops the todo from the active list.
        A failed update is logged and the in-memory change is kept.
        """
        task = self.selected_task
        if task is None:
            return None

        next_status, delay = advance(task.status)
        task.status = next_status
        task.completed = next_status.is_terminal
        if next_status.is_terminal:
            task.deadline = self._clock()
        elif delay > timedelta(0):
            task.deadline = self._clock() + delay

        try:
            self._repo.update_task(task)
        except Exception:
            logger.exception("Failed to update todo id=%s", task.id)

        if next_status.is_terminal:
            del self._tasks[self.selected]
            self._clamp_selection()
            logger.info("Todo finished id=%s remaining=%d", task.id, len(self._tasks))

        return task

    def close(self) -> int:
        """Session teardown: prune old finished todos once. Returns rows removed."""
        if self._closed:
            return 0
        self._closed = True
        try:
            return self._repo.prune_terminal_older_than(self._retention, now=self._clock())
        except Exception:
            logger.exception("Failed to prune finished todos.")
            return 0

    # ---- helpers ----

    def _clamp_selection(self) -> None:
        if not self._tasks:
            self.selected = 0
        elif self.selected >= len(self._tasks):
            self.selected = len(self._tasks) - 1
        elif self.selected < 0:
            self.selected = 0
