"""SQLite adapter using the stdlib sqlite3 driver."""

from __future__ import annotations

import sqlite3
from typing import Any, Sequence

from forum_orm.core.connection import ConnectionConfig
from forum_orm.core.exceptions import ConnectionError, ConstraintViolationError  # noqa: A004


class SqliteAdapter:
    """SQLite adapter returning ``sqlite3.Row`` records."""

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        """Open a connection configured for name-keyed, typed rows."""
        detect_types = sqlite3.PARSE_DECLTYPES if config.detect_types else 0
        try:
            conn = sqlite3.connect(
                config.database,
                timeout=config.timeout,
                detect_types=detect_types,
                **config.extra,
            )
        except sqlite3.Error as e:
            raise ConnectionError(f"Cannot open '{config.database}': {e}") from e
        conn.row_factory = sqlite3.Row
        if config.foreign_keys:
            conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def close(self, connection: sqlite3.Connection) -> None:
        connection.close()

    def execute(
        self,
        connection: sqlite3.Connection,
        sql: str,
        params: dict[str, Any] | Sequence[Any] | None = None,
    ) -> sqlite3.Cursor:
        """Execute SQL and return a cursor.

        Integrity failures are raised as ConstraintViolationError; other
        driver errors propagate to the engine.
        """
        try:
            return connection.execute(sql, params if params is not None else ())
        except sqlite3.IntegrityError as e:
            raise ConstraintViolationError(str(e)) from e

    def last_inserted_id(self, connection: sqlite3.Connection) -> int:
        row = connection.execute("SELECT last_insert_rowid()").fetchone()
        return int(row[0])
