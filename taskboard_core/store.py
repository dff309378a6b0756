import logging
import os
import sqlite3
from typing import List, Optional

from .models import Task

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the task database cannot be opened or prepared."""


class TaskStore:
    """SQLite-backed persistence for tasks. One connection per process."""

    # Columns added after the first schema shipped; older files get them on startup.
    OPTIONAL_COLUMNS = [
        ("completed", "INTEGER DEFAULT 0"),
        ("due_date", "TEXT"),
    ]

    def __init__(self, db_path: str):
        self.db_path = db_path
        try:
            self._conn = self._connect()
            self.initialize()
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open task database at {self.db_path}: {e}") from e

    def _connect(self) -> sqlite3.Connection:
        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        logger.debug("Opening task database %s", self.db_path)
        conn = sqlite3.connect(self.db_path, check_same_thread=False, isolation_level=None)
        conn.row_factory = sqlite3.Row
        return conn

    def initialize(self) -> List[str]:
        """
        Ensures the tasks table exists and carries every optional column.
        Safe to run on every startup. Returns the names of columns added.
        """
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id          INTEGER PRIMARY KEY AUTOINCREMENT,
                title       TEXT NOT NULL,
                description TEXT,
                due_date    TEXT,
                completed   INTEGER DEFAULT 0,
                created_at  TEXT DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        existing = {row["name"] for row in self._conn.execute("PRAGMA table_info(tasks)")}
        added = []
        for name, definition in self.OPTIONAL_COLUMNS:
            if name not in existing:
                logger.info("Adding missing column '%s' to tasks table", name)
                self._conn.execute(f"ALTER TABLE tasks ADD COLUMN {name} {definition}")
                added.append(name)
        return added

    def list_tasks(self) -> List[Task]:
        rows = self._conn.execute(
            """
            SELECT id, title, description, due_date, completed, created_at
            FROM tasks
            ORDER BY completed ASC,
                     CASE WHEN due_date IS NULL OR due_date = '' THEN 1 ELSE 0 END,
                     due_date ASC,
                     id DESC
            """
        ).fetchall()
        return [Task.from_row(row) for row in rows]

    def get_task(self, task_id: int) -> Optional[Task]:
        row = self._conn.execute(
            "SELECT id, title, description, due_date, completed, created_at FROM tasks WHERE id = ?",
            (task_id,),
        ).fetchone()
        return Task.from_row(row) if row else None

    def create_task(self, title: str, description: str = "", due_date: Optional[str] = None) -> int:
        cursor = self._conn.execute(
            "INSERT INTO tasks (title, description, due_date, completed) VALUES (?, ?, ?, 0)",
            (title, description, due_date),
        )
        return cursor.lastrowid

    def update_task(self, task_id: int, title: str, description: str, due_date: Optional[str]) -> int:
        cursor = self._conn.execute(
            "UPDATE tasks SET title = ?, description = ?, due_date = ? WHERE id = ?",
            (title, description, due_date, task_id),
        )
        return cursor.rowcount

    def set_completed(self, task_id: int, completed: bool) -> int:
        cursor = self._conn.execute(
            "UPDATE tasks SET completed = ? WHERE id = ?",
            (1 if completed else 0, task_id),
        )
        return cursor.rowcount

    def delete_task(self, task_id: int) -> int:
        cursor = self._conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        return cursor.rowcount

    def close(self):
        self._conn.close()

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
