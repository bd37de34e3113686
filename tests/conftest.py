"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from forum_orm.core.connection import ConnectionConfig, ConnectionManager
from forum_orm.core.engine import Engine
from forum_orm.core.registry import SQLRegistry
from forum_orm.forum import Forum

RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config."""
    return ConnectionConfig(driver="sqlite", database=":memory:")


@pytest.fixture
def tmp_sql_dir(tmp_path: Path) -> Path:
    """Temporary directory for SQL files."""
    return tmp_path / "sql"


@pytest.fixture
def write_sql(tmp_sql_dir: Path):
    """Helper to write SQL files into the temp directory.

    Usage:
        write_sql("users/by_name.sql", "SELECT * FROM users WHERE fname = :fname")
    """

    def _write(relative_path: str, content: str) -> Path:
        file_path = tmp_sql_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def engine(sqlite_config: ConnectionConfig) -> Iterator[Engine]:
    """Engine over an in-memory database loaded with the forum schema and seed rows."""
    manager = ConnectionManager(sqlite_config)
    eng = Engine(manager, SQLRegistry())

    with manager.get_connection() as conn:
        conn.executescript((RESOURCES / "import_db.sql").read_text(encoding="utf-8"))
        conn.commit()

    yield eng
    eng.close()


@pytest.fixture
def forum(engine: Engine) -> Forum:
    return Forum(engine)
