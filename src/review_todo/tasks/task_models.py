# tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

logger = logging.getLogger(__name__)


class TaskStatus(StrEnum):
    """
    Review status of a task, in strict escalation order.

    Notes:
    - Stored on disk as a single legacy marker character (see `legacy`),
      never as the enum value.
    - DONE is the only terminal status.
    """

    BLANK = "blank"
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    DONE = "done"

    @property
    def legacy(self) -> str:
        return _LEGACY_BY_STATUS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @property
    def is_terminal(self) -> bool:
        return self is TaskStatus.DONE

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus:
        """Accept either an enum value ("first") or a legacy marker ("·")."""
        if isinstance(raw, TaskStatus):
            return raw
        if raw in _VALUES:
            return cls(raw)
        return cls.from_legacy(raw)

    @classmethod
    def from_legacy(cls, raw: str | None) -> TaskStatus:
        """Decode a stored marker; empty or unknown markers decode to BLANK."""
        if not raw or raw == " ":
            return cls.BLANK
        status = _STATUS_BY_LEGACY.get(raw[0])
        if status is None:
            logger.debug("Unknown status marker %r, treating as blank.", raw)
            return cls.BLANK
        return status


_ORDER: tuple[TaskStatus, ...] = tuple(TaskStatus)
_VALUES = frozenset(s.value for s in TaskStatus)

_LEGACY_BY_STATUS: dict[TaskStatus, str] = {
    TaskStatus.BLANK: " ",
    TaskStatus.FIRST: "·",
    TaskStatus.SECOND: "*",
    TaskStatus.THIRD: "o",
    TaskStatus.FOURTH: "x",
    TaskStatus.DONE: "√",
}

_STATUS_BY_LEGACY: dict[str, TaskStatus] = {v: k for k, v in _LEGACY_BY_STATUS.items()}

_LABELS: dict[TaskStatus, str] = {
    TaskStatus.BLANK: "",
    TaskStatus.FIRST: "1st",
    TaskStatus.SECOND: "2nd",
    TaskStatus.THIRD: "3rd",
    TaskStatus.FOURTH: "4th",
    TaskStatus.DONE: "finish",
}

LABEL_WIDTH = 8


def fit_width(text: str, width: int) -> str:
    """Pad or truncate `text` to exactly `width` characters."""
    if width <= 0:
        return ""
    if len(text) > width:
        if width == 1:
            return text[:1]
        return text[: width - 1] + "…"
    return text.ljust(width)


@dataclass(slots=True)
class Task:
    content: str
    status: TaskStatus = TaskStatus.BLANK
    deadline: datetime = field(default_factory=datetime.now)
    completed: bool = False

    # Surrogate key assigned by the store on insert; None until persisted.
    id: int | None = None
    created_at: datetime | None = None

    @classmethod
    def new(cls, content: str, now: datetime) -> Task:
        """Build a fresh task in the initial status; blank content is rejected."""
        text = (content or "").strip()
        if not text:
            raise ValueError("content cannot be empty")
        return cls(content=text, status=TaskStatus.BLANK, deadline=now, created_at=now)

    def is_due(self, now: datetime) -> bool:
        """Informational only: nothing escalates a task automatically."""
        return not self.status.is_terminal and self.deadline <= now

    def display_line(self, width: int = 30) -> str:
        return (
            f"[{self.status.legacy}] {fit_width(self.content, width)} "
            f"{self.status.label:<{LABEL_WIDTH}} "
            f"{self.deadline:%m-%d} {self.deadline:%H:%M}"
        )
