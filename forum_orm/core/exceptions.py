"""forum-orm exception hierarchy.

Driver exceptions are translated at the adapter/engine boundary and chained
with ``from``; callers only ever see ``ForumORMError`` subclasses.
"""

from __future__ import annotations


class ForumORMError(Exception):
    """Base exception for all forum-orm errors."""


# --- Registry ---


class RegistryError(ForumORMError):
    """Base for SQL registry errors."""


class QueryNotFoundError(RegistryError):
    """Raised when a named query cannot be found in the registry."""

    def __init__(self, query_name: str) -> None:
        self.query_name = query_name
        super().__init__(f"Query not found: '{query_name}'")


class DuplicateQueryError(RegistryError):
    """Raised when two SQL files resolve to the same namespace key."""

    def __init__(self, query_name: str, path_a: str, path_b: str) -> None:
        self.query_name = query_name
        super().__init__(f"Duplicate query name '{query_name}': {path_a} and {path_b}")


# --- Execution ---


class ExecutionError(ForumORMError):
    """Base for statement execution errors."""


class MultipleRowsError(ExecutionError):
    """Raised when fetch_one encounters more than one row."""

    def __init__(self, query_name: str, row_count: int) -> None:
        self.query_name = query_name
        self.row_count = row_count
        super().__init__(
            f"fetch_one for '{query_name}' returned {row_count} rows (expected 0 or 1)"
        )


class StatementError(ExecutionError):
    """Raised when the storage engine rejects a statement."""

    def __init__(self, query_name: str, detail: str) -> None:
        self.query_name = query_name
        self.detail = detail
        super().__init__(f"Statement '{query_name}' failed: {detail}")


class ConstraintViolationError(ExecutionError):
    """Raised when a NOT NULL, UNIQUE or FOREIGN KEY constraint is violated."""

    def __init__(self, detail: str, query_name: str = "<inline>") -> None:
        self.query_name = query_name
        self.detail = detail
        super().__init__(f"Constraint violation in '{query_name}': {detail}")


# --- Mapping ---


class MappingError(ForumORMError):
    """Base for mapping errors."""


class ColumnMismatchError(MappingError):
    """Raised when a row cannot be deserialized into its entity."""

    def __init__(self, target_class: str, problems: list[str]) -> None:
        self.target_class = target_class
        self.problems = problems
        super().__init__(f"Cannot map to {target_class}: {problems}")


class UnknownAttributeError(MappingError):
    """Raised when a filter names an attribute the entity does not declare."""

    def __init__(self, entity: str, attribute: str) -> None:
        self.entity = entity
        self.attribute = attribute
        super().__init__(f"{entity} has no attribute or column '{attribute}'")


class MalformedDynamicQueryError(MappingError):
    """Raised when a find_by_* name cannot be parsed or its arity is wrong."""

    def __init__(self, finder_name: str, detail: str) -> None:
        self.finder_name = finder_name
        super().__init__(f"Malformed finder '{finder_name}': {detail}")


# --- Adapter ---


class AdapterError(ForumORMError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised on connection failures."""
