# tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from datetime import datetime, timedelta
from pathlib import Path

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

DEADLINE_FORMAT = "%Y-%m-%d %H:%M"
# Rows written by older builds carry no year.
LEGACY_DEADLINE_FORMAT = "%m-%d %H:%M"
CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_deadline(value: datetime) -> str:
    return value.strftime(DEADLINE_FORMAT)


def parse_deadline(raw: str | None, *, now: datetime | None = None) -> datetime | None:
    """
    Decode a stored deadline.

    Returns None when the value cannot be parsed; callers pick the fallback.
    Legacy month-day values are placed in the year of `now`.
    """
    if not raw:
        return None
    text = str(raw).strip()
    for fmt in (DEADLINE_FORMAT, CREATED_AT_FORMAT):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            pass
    try:
        # Parse with an explicit leap year so "02-29" survives, then move to now's year.
        legacy = datetime.strptime(f"2000-{text}", f"%Y-{LEGACY_DEADLINE_FORMAT}")
    except ValueError:
        return None
    year = (now or datetime.now()).year
    try:
        return legacy.replace(year=year)
    except ValueError:
        return legacy.replace(year=year, day=28)


class TaskStore:
    """
    SQLite todo store.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Statuses are stored as their single legacy marker character.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "todos.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    content TEXT NOT NULL,
                    status TEXT NOT NULL,
                    deadline TEXT NOT NULL,
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(todos)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE todos ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("completed", "INTEGER NOT NULL DEFAULT 0")
            add_col("created_at", "TEXT NOT NULL DEFAULT ''")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_todos_status ON todos(status)")
            cur.execute("CREATE INDEX IF NOT EXISTS idx_todos_content ON todos(content)")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row, now: datetime) -> Task:
        status = TaskStatus.from_legacy(row["status"])
        deadline = parse_deadline(row["deadline"], now=now)
        if deadline is None:
            logger.warning(
                "Malformed deadline %r for todo id=%s; using current time.",
                row["deadline"],
                row["id"],
            )
            deadline = now
        return Task(
            id=int(row["id"]),
            content=str(row["content"] or ""),
            status=status,
            deadline=deadline,
            completed=bool(row["completed"]),
            created_at=parse_deadline(row["created_at"], now=now),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM todos")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def load_active(self) -> list[Task]:
        """All non-terminal todos, most recently created first."""
        now = datetime.now()
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                SELECT id, content, status, deadline, completed, created_at
                FROM todos
                WHERE status != ?
                ORDER BY created_at DESC, id DESC
                """,
                (TaskStatus.DONE.legacy,),
            )
            tasks = [self._row_to_task(r, now) for r in cur.fetchall()]
            logger.debug("Loaded %d active todos", len(tasks))
            return tasks
        finally:
            conn.close()

    def insert_task(self, task: Task) -> int:
        """Insert `task`, assign its surrogate id and return it."""
        if not task.content or not task.content.strip():
            raise ValueError("content cannot be empty")

        created_at = task.created_at or datetime.now()

        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                INSERT INTO todos(content, status, deadline, completed, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    task.content,
                    task.status.legacy,
                    format_deadline(task.deadline),
                    int(task.completed),
                    created_at.strftime(CREATED_AT_FORMAT),
                ),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise sqlite3.DatabaseError("SQLite did not return lastrowid for todos insert")
            task.id = int(rowid)
            task.created_at = created_at
            logger.debug("Todo added id=%s status=%s", task.id, task.status.value)
            return task.id
        finally:
            conn.close()

    def update_task(self, task: Task) -> int:
        """
        Overwrite status, deadline and completed for `task`.

        Keyed by surrogate id; tasks that were never assigned one fall back to
        matching on content. Returns the number of rows touched.
        """
        params = [task.status.legacy, format_deadline(task.deadline), int(task.completed)]
        if task.id is not None:
            where = "id = ?"
            params.append(int(task.id))
        else:
            where = "content = ?"
            params.append(task.content)

        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                f"UPDATE todos SET status = ?, deadline = ?, completed = ? WHERE {where}",
                params,
            )
            conn.commit()
            if cur.rowcount == 0:
                logger.warning("Update matched no todo (id=%s)", task.id)
            elif cur.rowcount > 1:
                logger.warning("Update by content matched %d todos", cur.rowcount)
            return int(cur.rowcount)
        finally:
            conn.close()

    def prune_terminal_older_than(
        self,
        retention: timedelta,
        *,
        now: datetime | None = None,
    ) -> int:
        """
        Delete finished todos whose completion instant is older than `retention`.

        Deadlines are compared in Python so rows in the legacy format are
        handled as well. Unparseable deadlines are kept.
        """
        if now is None:
            now = datetime.now()
        cutoff = now - retention

        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                "SELECT id, deadline FROM todos WHERE status = ?",
                (TaskStatus.DONE.legacy,),
            )
            stale: list[int] = []
            for row in cur.fetchall():
                deadline = parse_deadline(row["deadline"], now=now)
                if deadline is not None and deadline < cutoff:
                    stale.append(int(row["id"]))

            if stale:
                cur.executemany("DELETE FROM todos WHERE id = ?", [(i,) for i in stale])
                conn.commit()
            logger.info("Pruned %d finished todos older than %s", len(stale), cutoff)
            return len(stale)
        finally:
            conn.close()
