# tests/test_lifecycle.py

from __future__ import annotations

from datetime import timedelta

import pytest

from review_todo.tasks.lifecycle import TRANSITIONS, advance
from review_todo.tasks.task_models import TaskStatus


@pytest.mark.parametrize(
    ("current", "expected", "delay"),
    [
        (TaskStatus.BLANK, TaskStatus.FIRST, timedelta(0)),
        (TaskStatus.FIRST, TaskStatus.SECOND, timedelta(hours=2)),
        (TaskStatus.SECOND, TaskStatus.THIRD, timedelta(hours=12)),
        (TaskStatus.THIRD, TaskStatus.FOURTH, timedelta(hours=24)),
        (TaskStatus.FOURTH, TaskStatus.DONE, timedelta(days=7)),
        (TaskStatus.DONE, TaskStatus.DONE, timedelta(0)),
    ],
)
def test_advance_table(current, expected, delay) -> None:
    assert advance(current) == (expected, delay)


def test_table_covers_every_status() -> None:
    assert set(TRANSITIONS) == set(TaskStatus)


def test_advance_never_moves_backwards() -> None:
    for status in TaskStatus:
        nxt, delay = advance(status)
        assert nxt.rank >= status.rank
        assert delay >= timedelta(0)


def test_terminal_is_absorbing() -> None:
    status = TaskStatus.DONE
    for _ in range(3):
        status, delay = advance(status)
        assert status is TaskStatus.DONE
        assert delay == timedelta(0)


def test_five_advances_from_blank_walk_the_whole_ladder() -> None:
    status = TaskStatus.BLANK
    seen = []
    for _ in range(5):
        status, _delay = advance(status)
        seen.append(status)
    assert seen == [
        TaskStatus.FIRST,
        TaskStatus.SECOND,
        TaskStatus.THIRD,
        TaskStatus.FOURTH,
        TaskStatus.DONE,
    ]


@pytest.mark.parametrize("raw", [None, "", " ", "?", "zz"])
def test_unknown_markers_behave_like_blank(raw) -> None:
    assert advance(raw) == (TaskStatus.FIRST, timedelta(0))


def test_advance_accepts_legacy_markers_and_values() -> None:
    assert advance("o") == (TaskStatus.FOURTH, timedelta(hours=24))
    assert advance("second") == (TaskStatus.THIRD, timedelta(hours=12))
