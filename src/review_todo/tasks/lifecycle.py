# src/review_todo/tasks/lifecycle.py

"""
Escalation policy.

One closed table decides which status follows the current one and how far the
new deadline lies from "now". Pure: no clock, no I/O.
"""

from __future__ import annotations

from datetime import timedelta

from .task_models import TaskStatus

TRANSITIONS: dict[TaskStatus, tuple[TaskStatus, timedelta]] = {
    TaskStatus.BLANK: (TaskStatus.FIRST, timedelta(0)),
    TaskStatus.FIRST: (TaskStatus.SECOND, timedelta(hours=2)),
    TaskStatus.SECOND: (TaskStatus.THIRD, timedelta(hours=12)),
    TaskStatus.THIRD: (TaskStatus.FOURTH, timedelta(hours=24)),
    TaskStatus.FOURTH: (TaskStatus.DONE, timedelta(days=7)),
    TaskStatus.DONE: (TaskStatus.DONE, timedelta(0)),
}


def advance(status: TaskStatus | str | None) -> tuple[TaskStatus, timedelta]:
    """
    Return (next_status, delay) for `status`.

    Raw markers are decoded leniently: anything unrecognized is treated as BLANK
    and therefore advances to FIRST with no delay.
    """
    return TRANSITIONS[TaskStatus.parse(status)]
