"""SQL Registry - loads and caches SQL files from a directory structure.

Namespace convention:
    sql/question_likes/most_liked.sql -> "question_likes.most_liked"
    sql/users/average_karma.sql       -> "users.average_karma"

The package ships its relationship queries under ``forum_orm/sql``; that
directory is used when no root is given.
"""

from __future__ import annotations

from pathlib import Path

from forum_orm.core.exceptions import DuplicateQueryError, QueryNotFoundError

BUNDLED_SQL_DIR = Path(__file__).resolve().parent.parent / "sql"


class SQLRegistry:
    """Loads and caches SQL files from a directory structure.

    The registry is immutable after loading: load once at startup, then
    read-only access for the lifetime of the application.

    Args:
        root_dir: Root directory containing SQL files. Defaults to the
            queries bundled with the package.

    Raises:
        DuplicateQueryError: If two files resolve to the same namespace key.
    """

    def __init__(self, root_dir: Path | str | None = None) -> None:
        self._root_dir = Path(root_dir) if root_dir is not None else BUNDLED_SQL_DIR
        self._queries: dict[str, str] = {}
        self._query_paths: dict[str, Path] = {}
        self._load()

    def _load(self) -> None:
        """Recursively load all .sql files from root directory."""
        if not self._root_dir.exists():
            return

        for sql_file in sorted(self._root_dir.rglob("*.sql")):
            relative = sql_file.relative_to(self._root_dir)
            parts = list(relative.parts)
            parts[-1] = parts[-1].removesuffix(".sql")
            query_name = ".".join(parts)

            if query_name in self._queries:
                raise DuplicateQueryError(
                    query_name,
                    str(self._query_paths[query_name]),
                    str(sql_file),
                )

            self._queries[query_name] = sql_file.read_text(encoding="utf-8").strip()
            self._query_paths[query_name] = sql_file

    def get(self, query_name: str) -> str:
        """Look up SQL text by namespace-qualified name.

        Raises:
            QueryNotFoundError: If no query matches the given name.
        """
        try:
            return self._queries[query_name]
        except KeyError:
            raise QueryNotFoundError(query_name) from None

    def has(self, query_name: str) -> bool:
        """Check if a query name is registered."""
        return query_name in self._queries
