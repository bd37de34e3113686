"""Statement execution engine.

The Engine resolves a query (registry key or inline SQL), binds parameters,
executes it through the adapter on the shared connection, and optionally
applies a mapper to the resulting rows.
"""

from __future__ import annotations

import logging
from typing import Any

from forum_orm.core.connection import ConnectionConfig, ConnectionManager
from forum_orm.core.exceptions import (
    ConstraintViolationError,
    ForumORMError,
    MultipleRowsError,
    StatementError,
)
from forum_orm.core.params import coerce_params, resolve_sql
from forum_orm.core.registry import SQLRegistry

logger = logging.getLogger(__name__)


def _rows_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor results to a list of column-keyed dicts."""
    if cursor.description is None:
        return []
    columns = [desc[0] for desc in cursor.description]
    rows = cursor.fetchall()
    if not rows:
        return []

    # sqlite3.Row supports keys(); plain tuples are zipped with the description
    if hasattr(rows[0], "keys"):
        return [dict(row) for row in rows]
    return [dict(zip(columns, row, strict=True)) for row in rows]


class Engine:
    """Synchronous statement execution engine over one connection."""

    def __init__(
        self,
        connection_manager: ConnectionManager,
        registry: SQLRegistry | None = None,
    ) -> None:
        self._connection_manager = connection_manager
        self._registry = registry if registry is not None else SQLRegistry()

    @classmethod
    def from_config(
        cls,
        config: ConnectionConfig,
        registry: SQLRegistry | None = None,
    ) -> Engine:
        """Create an Engine from a ConnectionConfig and optional SQLRegistry."""
        return cls(ConnectionManager(config), registry)

    @property
    def connection_manager(self) -> ConnectionManager:
        return self._connection_manager

    @property
    def registry(self) -> SQLRegistry:
        return self._registry

    def _run(self, conn: Any, query: str, params: Any) -> Any:
        sql, label = resolve_sql(query, self._registry)
        bound = coerce_params(params)
        logger.debug("Executing %s with %r", label, bound)
        try:
            return self._connection_manager.adapter.execute(conn, sql, bound)
        except ConstraintViolationError as e:
            raise ConstraintViolationError(e.detail, label) from e.__cause__
        except ForumORMError:
            raise
        except Exception as e:
            raise StatementError(label, str(e)) from e

    def fetch_one(
        self,
        query: str,
        params: Any = None,
        *,
        mapper: Any | None = None,
    ) -> Any:
        """Fetch a single row.

        Returns None if zero rows match.
        Raises MultipleRowsError if more than one row matches.
        """
        with self._connection_manager.get_connection() as conn:
            rows = _rows_to_dicts(self._run(conn, query, params))

        if len(rows) == 0:
            return None
        if len(rows) > 1:
            raise MultipleRowsError(resolve_sql(query, self._registry)[1], len(rows))

        row = rows[0]
        if mapper is not None:
            return mapper.map_one(row)
        return row

    def fetch_all(
        self,
        query: str,
        params: Any = None,
        *,
        mapper: Any | None = None,
    ) -> Any:
        """Fetch all matching rows."""
        with self._connection_manager.get_connection() as conn:
            rows = _rows_to_dicts(self._run(conn, query, params))

        if mapper is not None:
            return mapper.map_many(rows)
        return rows

    def fetch_scalar(self, query: str, params: Any = None) -> Any:
        """Fetch a single scalar value (first column of first row)."""
        with self._connection_manager.get_connection() as conn:
            row = self._run(conn, query, params).fetchone()
            if row is None:
                return None
            return row[0]

    def execute(self, query: str, params: Any = None) -> int:
        """Execute a write statement and commit. Returns affected row count."""
        with self._connection_manager.get_connection() as conn:
            cursor = self._run(conn, query, params)
            conn.commit()
            return int(cursor.rowcount)

    def last_inserted_id(self) -> int:
        """Return the id the storage engine assigned to the latest insert."""
        with self._connection_manager.get_connection() as conn:
            return self._connection_manager.adapter.last_inserted_id(conn)

    def close(self) -> None:
        """Close the underlying connection."""
        self._connection_manager.close()
