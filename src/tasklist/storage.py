"""SQLite storage layer for tasklist.

Bootstrap (locating the data file, creating the folder and the schema) and
the ``TaskStore`` operations all live here. Every store operation runs as a
single transaction on the connection handed out by :func:`open_connection`.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Iterator, List

from .config import ConfigModel
from .task import Task


logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER NOT NULL,
    name TEXT NOT NULL,
    date_added TEXT NOT NULL DEFAULT current_timestamp,
    is_done INTEGER NOT NULL DEFAULT 0,
    PRIMARY KEY (id AUTOINCREMENT)
)
"""

LIST_BY_ID_SQL = "SELECT id, name, date_added, is_done FROM tasks ORDER BY id"
LIST_BY_STATUS_SQL = "SELECT id, name, date_added, is_done FROM tasks ORDER BY is_done, id"


class StorageError(Exception):
    """Raised when the underlying database reports a failure."""


class BootstrapError(StorageError):
    """Raised when the data folder cannot be located or created."""


def verify_db_path(db_folder: Path) -> bool:
    """Create the folder holding the database if it doesn't exist.

    Returns:
        True if the folder was created by this call

    Raises:
        BootstrapError: If the folder cannot be created
    """
    if db_folder.is_dir():
        return False
    try:
        db_folder.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise BootstrapError(f"Could not create the database folder {db_folder}: {e}") from e
    logger.info(f"Created the database folder at: {db_folder}")
    return True


def verify_db(conn: sqlite3.Connection) -> None:
    """Create the tasks table if it does not exist."""
    try:
        with conn:
            conn.execute(SCHEMA_SQL)
    except sqlite3.Error as e:
        raise StorageError(f"Could not create the tasks table: {e}") from e


def resolve_db_path(config: ConfigModel) -> Path:
    """Work out where the database file lives.

    Raises:
        BootstrapError: If the home directory cannot be determined
    """
    try:
        return config.get_db_path()
    except RuntimeError as e:
        raise BootstrapError(f"Could not determine the user's home directory: {e}") from e


def open_connection(config: ConfigModel) -> sqlite3.Connection:
    """Return a connection to the task database, creating it if needed.

    Safe to call repeatedly; an existing folder, file and table are reused.
    """
    db_path = resolve_db_path(config)
    verify_db_path(db_path.parent)

    try:
        conn = sqlite3.connect(db_path)
    except sqlite3.Error as e:
        raise StorageError(f"Could not open database {db_path}: {e}") from e

    try:
        verify_db(conn)
    except StorageError:
        conn.close()
        raise

    logger.debug(f"Opened task database at {db_path}")
    return conn


class TaskStore:
    """Persistence operations for tasks.

    The store owns its connection; use it as a context manager or call
    :meth:`close` when done.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    @classmethod
    def open(cls, config: ConfigModel) -> "TaskStore":
        """Bootstrap the database described by ``config`` and wrap it."""
        return cls(open_connection(config))

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self.conn.close()

    def add(self, name: str) -> int:
        """Add a new task and return its id.

        Raises:
            ValueError: If the name is empty
            StorageError: If the insert fails
        """
        if not name or not name.strip():
            raise ValueError("Task name must not be empty")
        try:
            with self.conn:
                cur = self.conn.execute("INSERT INTO tasks (name) VALUES (?)", (name,))
        except sqlite3.Error as e:
            raise StorageError(f"Failed to add task: {e}") from e
        logger.debug(f"Added task {cur.lastrowid}: {name!r}")
        return int(cur.lastrowid)

    def iter_tasks(self, sort_by_status: bool = False) -> Iterator[Task]:
        """Yield tasks one row at a time.

        Pending tasks come before done ones when ``sort_by_status`` is set;
        ties (and the unsorted case) are ordered by ascending id.
        """
        sql = LIST_BY_STATUS_SQL if sort_by_status else LIST_BY_ID_SQL
        try:
            cursor = self.conn.execute(sql)
            for row in cursor:
                yield Task.from_row(row)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to list tasks: {e}") from e

    def list_tasks(self, sort_by_status: bool = False) -> List[Task]:
        """Return all tasks in display order."""
        return list(self.iter_tasks(sort_by_status))

    def toggle(self, task_id: int) -> int:
        """Flip the done flag of a task.

        Returns:
            Number of rows affected, 0 when no task has that id
        """
        try:
            with self.conn:
                cur = self.conn.execute(
                    "UPDATE tasks SET is_done = 1 - is_done WHERE id = ?", (task_id,)
                )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to toggle task {task_id}: {e}") from e
        logger.debug(f"Toggled task {task_id}: {cur.rowcount} row(s) affected")
        return cur.rowcount

    def remove(self, task_id: int) -> int:
        """Delete a task.

        Returns:
            Number of rows affected, 0 when no task has that id
        """
        try:
            with self.conn:
                cur = self.conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        except sqlite3.Error as e:
            raise StorageError(f"Failed to remove task {task_id}: {e}") from e
        logger.debug(f"Removed task {task_id}: {cur.rowcount} row(s) affected")
        return cur.rowcount

    def reset(self) -> None:
        """Delete every task and restart ids at 1."""
        try:
            with self.conn:
                self.conn.execute("DELETE FROM tasks")
                self.conn.execute("DELETE FROM sqlite_sequence WHERE name = 'tasks'")
        except sqlite3.Error as e:
            raise StorageError(f"Failed to reset tasks: {e}") from e
        logger.info("Deleted all tasks and reset the id counter")
