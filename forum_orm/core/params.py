"""Query and parameter resolution.

A query is either a registry key (``question_likes.most_liked``) or inline
SQL. Parameters are a dict for ``:name`` placeholders or a sequence for
positional ``?`` placeholders.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from forum_orm.core.exceptions import StatementError

if TYPE_CHECKING:
    from forum_orm.core.registry import SQLRegistry

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_raw_sql(query: str) -> bool:
    """Return True if query is an inline SQL string rather than a registry key.

    Registry keys use dot-notation (e.g. ``users.average_karma``) and never
    contain whitespace.  Any SQL statement will contain at least one space.
    """
    return any(c.isspace() for c in query)


def coerce_params(
    params: dict[str, Any] | tuple[Any, ...] | list[Any] | Any,
) -> dict[str, Any] | tuple[Any, ...] | None:
    """Normalize *params* to a dict, tuple, or None.

    * ``None`` / ``dict`` → returned as-is (named parameter binding).
    * ``tuple`` / ``list`` → converted to ``tuple`` (positional binding).
    * Any other scalar → wrapped in a single-element tuple.
    """
    if params is None or isinstance(params, dict):
        return params
    if isinstance(params, (tuple, list)):
        return tuple(params)
    return (params,)


def resolve_sql(query: str, registry: SQLRegistry) -> tuple[str, str]:
    """Return ``(sql_text, label)`` for *query*.

    *label* is ``"<inline>"`` for inline SQL or the registry key for named
    queries; it is used in log lines and error messages.
    """
    if is_raw_sql(query):
        return query, "<inline>"
    return registry.get(query), query


def quote_identifier(name: str) -> str:
    """Validate a table or column name and return it double-quoted.

    Only plain identifiers are accepted; values never go through here.
    """
    if not _IDENTIFIER_PATTERN.match(name):
        raise StatementError("<inline>", f"invalid SQL identifier {name!r}")
    return f'"{name}"'
