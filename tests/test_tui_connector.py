# tests/test_tui_connector.py

from __future__ import annotations

import pytest
from textual.containers import VerticalScroll
from textual.widgets import Input

from review_todo.connectors.tui_connector import ReviewTodoApp, render_view
from review_todo.core.session import Focus, Session
from review_todo.tasks.task_models import Task, TaskStatus

from .fakes import FakeClock, FakeTaskRepo


def test_render_view_marks_selection_only_while_navigating(repo, clock) -> None:
    s = Session(repo, clock=clock, content_width=4)
    s.submit_text("a")
    s.submit_text("b")

    assert all(line.startswith("  ") for line in render_view(s).splitlines())

    s.toggle_focus()
    s.move_selection(1)
    lines = render_view(s).splitlines()
    assert lines[0].startswith("  [ ] a")
    assert lines[1].startswith("> [ ] b")


def test_render_view_empty(session: Session) -> None:
    assert render_view(session) == ""


@pytest.mark.asyncio
async def test_app_add_select_and_advance() -> None:
    repo = FakeTaskRepo()
    session = Session(repo, clock=FakeClock())
    app = ReviewTodoApp(session, title="test")

    async with app.run_test() as pilot:
        await pilot.press(*"milk")
        await pilot.press("enter")
        await pilot.pause()

        assert [t.content for t in session.tasks] == ["milk"]
        assert app.query_one("#entry", Input).value == ""

        await pilot.press("tab")
        assert session.focus is Focus.NAVIGATE

        await pilot.press("ctrl+y")
        await pilot.pause()
        assert session.tasks[0].status is TaskStatus.FIRST

        await pilot.press("tab")
        assert session.focus is Focus.INPUT


@pytest.mark.asyncio
async def test_app_keeps_input_when_save_fails() -> None:
    repo = FakeTaskRepo(fail_insert=True)
    session = Session(repo, clock=FakeClock())
    app = ReviewTodoApp(session)

    async with app.run_test() as pilot:
        await pilot.press(*"eggs")
        await pilot.press("enter")
        await pilot.pause()

        assert len(session) == 0
        assert app.query_one("#entry", Input).value == "eggs"


@pytest.mark.asyncio
async def test_selection_stays_visible_in_a_long_list() -> None:
    repo = FakeTaskRepo()
    clock = FakeClock()
    tasks = [Task(content=f"todo {i}", deadline=clock()) for i in range(30)]
    for t in tasks:
        repo.insert_task(t)
    session = Session(repo, tasks, clock=clock)
    app = ReviewTodoApp(session)

    async with app.run_test(size=(80, 14)) as pilot:
        await pilot.press("tab")
        for _ in range(29):
            await pilot.press("down")
        await pilot.pause()

        scroller = app.query_one("#todos-scroll", VerticalScroll)
        height = scroller.scrollable_content_region.height
        assert session.selected == 29
        assert height < 30
        assert scroller.scroll_y > 0
        assert scroller.scroll_y <= session.selected < scroller.scroll_y + height

        for _ in range(29):
            await pilot.press("up")
        await pilot.pause()

        assert session.selected == 0
        assert scroller.scroll_y == 0
