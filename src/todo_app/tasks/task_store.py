# src/todo_app/tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from .provisioning import DB_VERSION, DatabaseProvisioner
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store over the single `todo` table.

    The table comes from the bundled template (see provisioning.py); this class
    never issues DDL. Column layout of the template:
      id (INTEGER PK AUTOINCREMENT), name, description, priority, deadline,
      status (0/1 completion flag)

    Semantics:
    - list_all() returns every row, newest id first
    - update()/delete() on an unknown id are silent no-ops
    - storage errors are not caught here; they reach the caller

    Each method opens its own SQLite connection and closes it before returning.
    """

    def __init__(
        self,
        db_path: str | Path = "Todo.db",
        *,
        template_path: str | Path | None = None,
        version: int = DB_VERSION,
    ) -> None:
        self._db_path = Path(db_path)
        self._provisioner = DatabaseProvisioner(self._db_path, template_path, version)
        self._provisioner.ensure_ready()
        logger.info("TaskStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        self._provisioner.copy_if_missing()
        if not self._db_path.exists():
            # sqlite3.connect would silently create an empty database without the todo table.
            raise FileNotFoundError(f"Task database is missing: {self._db_path}")
        conn = sqlite3.connect(str(self._db_path))
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _is_blank(title: str) -> bool:
        return not title or not title.strip()

    @classmethod
    def _check_title(cls, task: Task) -> None:
        if cls._is_blank(task.title):
            raise ValueError("title is required")

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["name"] or ""),
            description=str(row["description"] or ""),
            priority=str(row["priority"] or ""),
            deadline=str(row["deadline"] or ""),
            is_completed=int(row["status"] or 0) == 1,
        )

    @staticmethod
    def _task_values(task: Task) -> tuple[str, str, str, str, int]:
        return (
            task.title,
            task.description or "",
            task.priority or "",
            task.deadline or "",
            1 if task.is_completed else 0,
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM todo").fetchone()
            return int(n)
        finally:
            conn.close()

    def list_all(self) -> list[Task]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM todo ORDER BY id DESC").fetchall()
            tasks = [self._row_to_task(r) for r in rows]
        finally:
            conn.close()
        logger.debug("Loaded %d todos from the database", len(tasks))
        return tasks

    def create(self, task: Task) -> int:
        """Insert a new row; task.id is ignored. Returns the id assigned by SQLite."""
        self._check_title(task)

        conn = self._get_conn()
        try:
            cur = conn.execute(
                """
                INSERT INTO todo(name, description, priority, deadline, status)
                VALUES (?, ?, ?, ?, ?)
                """,
                self._task_values(task),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise RuntimeError("SQLite did not return lastrowid for todo insert")
            task_id = int(rowid)
        finally:
            conn.close()

        logger.debug("Todo inserted id=%s priority=%s", task_id, task.priority)
        return task_id

    def update(self, task: Task) -> None:
        """
        Replace every column of the row with id == task.id. Unknown ids are a no-op.

        A blank title is refused unless the row already holds that exact title, so
        rows written with a blank name elsewhere can still be completed or reopened.
        """
        conn = self._get_conn()
        try:
            if self._is_blank(task.title):
                row = conn.execute("SELECT name FROM todo WHERE id = ?", (int(task.id),)).fetchone()
                if row is not None and (row["name"] or "") != task.title:
                    raise ValueError("title is required")
            cur = conn.execute(
                """
                UPDATE todo
                SET name = ?,
                    description = ?,
                    priority = ?,
                    deadline = ?,
                    status = ?
                WHERE id = ?
                """,
                (*self._task_values(task), int(task.id)),
            )
            conn.commit()
            affected = cur.rowcount
        finally:
            conn.close()

        logger.debug("Todo update id=%s rows=%s", task.id, affected)

    def set_completed(self, task_id: int, completed: bool) -> None:
        """Flip only the completion flag. Unknown ids are a no-op."""
        conn = self._get_conn()
        try:
            cur = conn.execute(
                "UPDATE todo SET status = ? WHERE id = ?",
                (1 if completed else 0, int(task_id)),
            )
            conn.commit()
            affected = cur.rowcount
        finally:
            conn.close()

        logger.debug("Todo set_completed id=%s completed=%s rows=%s", task_id, completed, affected)

    def delete(self, task: Task) -> None:
        """Remove the row with id == task.id. Unknown ids are a no-op."""
        conn = self._get_conn()
        try:
            cur = conn.execute("DELETE FROM todo WHERE id = ?", (int(task.id),))
            conn.commit()
            affected = cur.rowcount
        finally:
            conn.close()

        logger.debug("Todo delete id=%s rows=%s", task.id, affected)
