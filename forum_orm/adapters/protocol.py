"""Storage adapter protocol.

The engine only talks to the driver through this interface.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from forum_orm.core.connection import ConnectionConfig


@runtime_checkable
class StorageAdapter(Protocol):
    """Synchronous storage adapter protocol."""

    def connect(self, config: ConnectionConfig) -> Any:
        """Open a connection that returns rows keyed by column name."""
        ...

    def close(self, connection: Any) -> None:
        """Close the connection."""
        ...

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | Sequence[Any] | None = None,
    ) -> Any:
        """Execute SQL and return a cursor-like object."""
        ...

    def last_inserted_id(self, connection: Any) -> int:
        """Return the id assigned by the most recent insert."""
        ...
