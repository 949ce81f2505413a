# src/review_todo/connectors/tui_connector.py

"""
Full-screen terminal UI (Textual).

The app is a thin shell around Session: key bindings call Session commands and
the list view is redrawn from `Session.display_lines()` after each one.
"""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Input, Static

from ..core.session import DOWN, UP, Focus, Session

logger = logging.getLogger(__name__)

LEGEND = (
    "Schedule: [·] first pass  [*] +2h  [o] +12h  [x] +24h  [√] +7d\n"
    "(Tab switch | Enter add | Ctrl+Y advance | ↑↓ select | Ctrl+C quit)"
)


def render_view(session: Session) -> str:
    """Build the list text; the selected row is marked only while navigating."""
    navigating = session.focus is Focus.NAVIGATE
    out: list[str] = []
    for i, line in enumerate(session.display_lines()):
        prefix = "> " if navigating and i == session.selected else "  "
        out.append(prefix + line)
    return "\n".join(out)


class ReviewTodoApp(App[None]):
    CSS = """
    #todos-scroll {
        height: 1fr;
    }
    #entry {
        margin: 1 0 0 0;
    }
    #legend {
        color: $text-muted;
        margin: 1 0 0 0;
    }
    """

    BINDINGS = [
        Binding("tab", "toggle_focus", "Switch", priority=True),
        Binding("ctrl+y", "advance", "Advance", priority=True),
        Binding("up", "move_selection(-1)", "Up", show=False, priority=True),
        Binding("down", "move_selection(1)", "Down", show=False, priority=True),
        Binding("ctrl+c", "quit_app", "Quit", priority=True),
        Binding("escape", "quit_app", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: Session, *, title: str = "review-todo", char_limit: int = 280) -> None:
        super().__init__()
        self.session = session
        self._app_title = title
        self._char_limit = char_limit

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="todos-scroll"):
            yield Static("", id="todos", markup=False)
        yield Input(placeholder="todo...", max_length=self._char_limit, id="entry")
        yield Static(LEGEND, id="legend", markup=False)

    def on_mount(self) -> None:
        self.title = self._app_title
        self._sync_focus()
        self.refresh_todos()

    # ---- rendering ----

    def refresh_todos(self) -> None:
        self.query_one("#todos", Static).update(render_view(self.session))

    def scroll_selection_into_view(self) -> None:
        """Keep the selected row inside the viewport; the arrow keys never reach the scroller."""
        if self.session.focus is not Focus.NAVIGATE or not len(self.session):
            return
        scroller = self.query_one("#todos-scroll", VerticalScroll)
        row = self.session.selected
        top = round(scroller.scroll_y)
        height = max(1, scroller.scrollable_content_region.height)
        if row < top:
            scroller.scroll_to(y=row, animate=False)
        elif row >= top + height:
            scroller.scroll_to(y=row - height + 1, animate=False)

    def _sync_focus(self) -> None:
        entry = self.query_one("#entry", Input)
        if self.session.focus is Focus.INPUT:
            entry.focus()
        else:
            self.set_focus(None)

    # ---- events / actions ----

    def on_input_submitted(self, event: Input.Submitted) -> None:
        task = self.session.submit_text(event.value)
        if task is not None:
            event.input.value = ""
            self.refresh_todos()

    def action_toggle_focus(self) -> None:
        self.session.toggle_focus()
        self._sync_focus()
        self.refresh_todos()
        self.call_after_refresh(self.scroll_selection_into_view)

    def action_move_selection(self, direction: int) -> None:
        if self.session.move_selection(UP if direction < 0 else DOWN):
            self.refresh_todos()
            self.call_after_refresh(self.scroll_selection_into_view)

    def action_advance(self) -> None:
        if self.session.advance_selected() is not None:
            self.refresh_todos()
            self.call_after_refresh(self.scroll_selection_into_view)

    def action_quit_app(self) -> None:
        logger.info("Quit requested from TUI.")
        self.exit()


def run_tui(session: Session, *, title: str = "review-todo", char_limit: int = 280) -> None:
    logger.info("TUI connector started (todos=%d).", len(session))
    ReviewTodoApp(session, title=title, char_limit=char_limit).run()
    logger.info("TUI connector finished.")
