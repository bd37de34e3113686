"""Dynamic finder name parsing.

``find_by_fname_and_lname`` -> ``["fname", "lname"]``

The suffix after ``find_by_`` is split on ``_``, ``and`` tokens are dropped,
and the remaining tokens are regrouped into the longest attribute names the
entity knows, so multi-word attributes such as ``author_id`` survive.
"""

from __future__ import annotations

from collections.abc import Collection

from forum_orm.core.exceptions import MalformedDynamicQueryError

FINDER_PREFIX = "find_by_"


def is_finder_name(name: str) -> bool:
    return name.startswith(FINDER_PREFIX) and len(name) > len(FINDER_PREFIX)


def parse_finder_name(name: str, known: Collection[str]) -> list[str]:
    """Parse a ``find_by_*`` name into an ordered list of attribute names.

    Args:
        name: The finder name, including the ``find_by_`` prefix.
        known: Attribute and column names the entity accepts.

    Raises:
        MalformedDynamicQueryError: If the name lacks the prefix, contains an
            empty token, or a token run matches no known attribute.
    """
    if not is_finder_name(name):
        raise MalformedDynamicQueryError(name, f"expected a name starting with '{FINDER_PREFIX}'")

    raw = name[len(FINDER_PREFIX):].split("_")
    if any(token == "" for token in raw):
        raise MalformedDynamicQueryError(name, "empty attribute token")
    tokens = [token for token in raw if token.lower() != "and"]
    if not tokens:
        raise MalformedDynamicQueryError(name, "no attributes named")

    attributes: list[str] = []
    i = 0
    while i < len(tokens):
        for j in range(len(tokens), i, -1):
            candidate = "_".join(tokens[i:j])
            if candidate in known:
                attributes.append(candidate)
                i = j
                break
        else:
            raise MalformedDynamicQueryError(name, f"no attribute matches '{tokens[i]}'")
    return attributes
