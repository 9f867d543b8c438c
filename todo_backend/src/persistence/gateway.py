from __future__ import annotations

import logging
import sqlite3
from typing import Any, List, Optional

from .db import connect
from .errors import ListNotFoundError
from .logs import configure_logging
from .models import ListRecord, TodoRecord, list_from_row, todo_from_row
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class PersistenceGateway:
    """
    Reads and writes todo lists and todos over a single database connection.

    Each operation is one parameterized statement sent through `query`, which
    logs the statement and its parameters before executing it. Driver errors
    propagate unchanged.
    """

    def __init__(self, logger: Any, conn: sqlite3.Connection) -> None:
        self._logger = logger
        self._conn = conn

    def __enter__(self) -> "PersistenceGateway":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._conn.close()

    def query(self, statement: str, *params: Any) -> List[sqlite3.Row]:
        self._logger.info(f"{' '.join(statement.split())}: {list(params)}")
        return self._conn.execute(statement, params).fetchall()

    # -------------------------- lists --------------------------
    def find_list(self, list_id: int) -> ListRecord:
        """Return the list with its todos. Raises ListNotFoundError if no row matches."""
        rows = self.query("SELECT * FROM lists WHERE id = ?", list_id)
        if not rows:
            raise ListNotFoundError(list_id=list_id)
        return self._list_with_todos(rows[0])

    def find_list_by_name(self, name: str) -> ListRecord:
        """Return the oldest list with this name. Raises ListNotFoundError if none."""
        rows = self.query("SELECT * FROM lists WHERE name = ? ORDER BY id LIMIT 1", name)
        if not rows:
            raise ListNotFoundError(name=name)
        return self._list_with_todos(rows[0])

    def all_lists(self) -> List[ListRecord]:
        rows = self.query("SELECT * FROM lists ORDER BY id")
        return [self._list_with_todos(row) for row in rows]

    def create_list(self, name: str) -> None:
        self.query(
            """
            INSERT INTO lists (name)
            VALUES (?)
            """,
            name,
        )

    def delete_list(self, list_id: int) -> None:
        self.query("DELETE FROM lists WHERE id = ?", list_id)

    def update_list_name(self, list_id: int, new_name: str) -> None:
        self.query(
            """
            UPDATE lists
            SET name = ?
            WHERE id = ?
            """,
            new_name,
            list_id,
        )

    # -------------------------- todos --------------------------
    # Todo mutations are scoped by list_id as well as todo id, so an id from
    # another list never matches.
    def create_todo(self, list_id: int, name: str) -> None:
        self.query(
            """
            INSERT INTO todos (list_id, name)
            VALUES (?, ?)
            """,
            list_id,
            name,
        )

    def delete_todo(self, list_id: int, todo_id: int) -> None:
        self.query(
            """
            DELETE FROM todos
            WHERE id = ? AND list_id = ?
            """,
            todo_id,
            list_id,
        )

    def update_todo_status(self, list_id: int, todo_id: int, status: bool) -> None:
        self.query(
            """
            UPDATE todos
            SET completed = ?
            WHERE list_id = ? AND id = ?
            """,
            bool(status),
            list_id,
            todo_id,
        )

    def mark_all_completed(self, list_id: int) -> None:
        self.query(
            """
            UPDATE todos
            SET completed = true
            WHERE list_id = ?
            """,
            list_id,
        )

    def _list_with_todos(self, row: sqlite3.Row) -> ListRecord:
        return list_from_row(row, self._load_todos_for_list(int(row["id"])))

    def _load_todos_for_list(self, list_id: int) -> List[TodoRecord]:
        rows = self.query("SELECT * FROM todos WHERE list_id = ? ORDER BY id", list_id)
        return [todo_from_row(row) for row in rows]


# PUBLIC_INTERFACE
def get_gateway(settings: Optional[Settings] = None) -> PersistenceGateway:
    """
    Build a gateway from settings: the package logger plus a fresh connection
    to the configured database file.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    conn = connect(settings.database_path, foreign_keys=settings.foreign_keys)
    return PersistenceGateway(logger, conn)
