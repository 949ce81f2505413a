# src/review_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the todo store, builds the Session and runs the
terminal UI in the main thread. Teardown prunes old finished todos.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_session, create_store
from ..config import get_settings
from ..connectors.tui_connector import run_tui
from ..core.session import Session
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _shutdown(session: Session | None, store: TaskStore | None) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    if session is not None:
        try:
            removed = session.close()
            logger.info("Pruned %d finished todos on exit.", removed)
        except Exception:
            logger.exception("Session close failed.")

    if store is not None:
        try:
            store.close()
        except Exception:
            logger.debug("Store close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO
    setup_logging(
        log_dir=settings.data_dir,
        console=settings.log_to_console,
        console_level=console_level,
    )

    logger.info("Starting %s...", settings.app_name)

    # Store unavailable at startup is fatal: let it propagate.
    store = create_store(settings)
    session: Session | None = None
    try:
        session = create_session(settings, store=store)
        run_tui(session, title=settings.app_name, char_limit=settings.char_limit)
    finally:
        _shutdown(session, store)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
