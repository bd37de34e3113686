"""Connection configuration and management.

ConnectionConfig is a Pydantic model for type-safe connection config.
ConnectionManager owns the single storage connection for the process and
delegates driver specifics to an adapter.
"""

from __future__ import annotations

import importlib
import logging
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel

from forum_orm.core.exceptions import AdapterError

logger = logging.getLogger(__name__)


class ConnectionConfig(BaseModel):
    """Configuration for the storage connection."""

    driver: str = "sqlite"
    database: str
    foreign_keys: bool = True
    detect_types: bool = True
    timeout: float = 5.0
    extra: dict[str, Any] = {}


# Adapter module mapping: driver name → (module_path, class_name)
_ADAPTER_MAP: dict[str, tuple[str, str]] = {
    "sqlite": ("forum_orm.adapters.sqlite", "SqliteAdapter"),
}


def _load_adapter(driver: str) -> Any:
    """Load an adapter by driver name."""
    driver_lower = driver.lower()
    if driver_lower not in _ADAPTER_MAP:
        raise AdapterError(f"Unsupported database driver: {driver}")

    module_path, cls_name = _ADAPTER_MAP[driver_lower]

    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load adapter for '{driver}': {e}") from e


class ConnectionManager:
    """Owns one storage connection, opened lazily on first use."""

    def __init__(self, config: ConnectionConfig) -> None:
        self.config = config
        self._adapter = _load_adapter(config.driver)
        self._connection: Any = None

    @property
    def adapter(self) -> Any:
        return self._adapter

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def open(self) -> Any:
        """Open the connection if it is not open yet."""
        if self._connection is None:
            self._connection = self._adapter.connect(self.config)
            logger.info("Opened %s connection to %s", self.config.driver, self.config.database)
        return self._connection

    @contextmanager
    def get_connection(self):  # type: ignore[no-untyped-def]
        """Yield the shared connection."""
        yield self.open()

    def close(self) -> None:
        """Close the connection."""
        if self._connection is not None:
            self._adapter.close(self._connection)
            self._connection = None
            logger.info("Closed connection to %s", self.config.database)
