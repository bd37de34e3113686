"""Generic entity repository.

Table-name-driven CRUD for any ``Entity`` subclass: lookups by id, by
equality conditions, by dynamic ``find_by_*`` names, and insert-or-update
``save``. Statements are generated from the entity's declared table and
columns; values are always bound positionally.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any, Generic, TypeVar

from forum_orm.core.exceptions import MalformedDynamicQueryError, UnknownAttributeError
from forum_orm.core.params import quote_identifier
from forum_orm.domain.entities import Entity
from forum_orm.mapping.model import ModelMapper
from forum_orm.mapping.protocol import Mapper
from forum_orm.repository.finders import is_finder_name, parse_finder_name

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


class Repository(Generic[T]):
    """Base repository bound to one entity class and one engine.

    Subclasses set ``entity`` and add relationship queries; a plain
    ``Repository(engine, entity=Question)`` serves generic lookups for any
    entity.
    """

    entity: type[Entity]

    def __init__(
        self,
        engine: Any,
        entity: type[T] | None = None,
        mapper: Mapper[T] | None = None,
    ) -> None:
        self.engine = engine
        if entity is not None:
            self.entity = entity
        self.mapper: Mapper[T] = mapper if mapper is not None else ModelMapper(self.entity)
        self._finders: dict[str, list[str]] = {}

    def __getattr__(self, name: str) -> Any:
        if is_finder_name(name):
            return partial(self.find_by, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def related(self, entity: type[Entity]) -> Repository[Any]:
        """Generic repository for another entity on the same engine."""
        return Repository(self.engine, entity=entity)

    @property
    def _table(self) -> str:
        return quote_identifier(self.entity.table_name)

    def find_by_id(self, entity_id: int | None) -> T | None:
        """Return the entity with this id, or None if no row matches."""
        return self.engine.fetch_one(
            f"SELECT * FROM {self._table} WHERE id = ?",
            (entity_id,),
            mapper=self.mapper,
        )

    def find_all(self) -> list[T]:
        return self.engine.fetch_all(f"SELECT * FROM {self._table}", mapper=self.mapper)

    def find_where(
        self,
        conditions: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[T]:
        """Return entities matching every condition.

        Keys are attribute or column names. A ``None`` value matches
        ``IS NULL``.
        """
        merged = {**(conditions or {}), **kwargs}
        if not merged:
            return self.find_all()

        clauses: list[str] = []
        params: list[Any] = []
        for name, value in merged.items():
            column = self.entity.column_for(name)
            if column is None:
                raise UnknownAttributeError(self.entity.__name__, name)
            if value is None:
                clauses.append(f"{quote_identifier(column)} IS NULL")
            else:
                clauses.append(f"{quote_identifier(column)} = ?")
                params.append(value)

        sql = f"SELECT * FROM {self._table} WHERE {' AND '.join(clauses)}"
        return self.engine.fetch_all(sql, tuple(params), mapper=self.mapper)

    def find_by(self, finder_name: str, *values: Any) -> list[T]:
        """Dispatch a ``find_by_<attr>[_and_<attr>...]`` lookup.

        The parsed attributes are zipped with *values* positionally and
        passed to ``find_where``.

        Raises:
            MalformedDynamicQueryError: If the name does not parse or the
                number of values differs from the number of attributes.
        """
        attributes = self._finders.get(finder_name)
        if attributes is None:
            columns = self.entity.column_map()
            known = set(columns) | set(columns.values())
            attributes = parse_finder_name(finder_name, known)
            self._finders[finder_name] = attributes

        if len(values) != len(attributes):
            raise MalformedDynamicQueryError(
                finder_name,
                f"expected {len(attributes)} argument(s) for {attributes}, got {len(values)}",
            )
        return self.find_where(dict(zip(attributes, values, strict=True)))

    def save(self, entity: T) -> T:
        """Insert a new entity or update a persisted one, in place.

        New entities adopt the id the storage engine assigns. Updating an id
        with no row is a no-op.
        """
        values = entity.column_values()

        if entity.is_new:
            columns = ", ".join(quote_identifier(column) for column in values)
            placeholders = ", ".join("?" for _ in values)
            self.engine.execute(
                f"INSERT INTO {self._table} ({columns}) VALUES ({placeholders})",
                tuple(values.values()),
            )
            entity.id = self.engine.last_inserted_id()
            logger.debug("Inserted %s id=%s", self.entity.table_name, entity.id)
        else:
            assignments = ", ".join(f"{quote_identifier(column)} = ?" for column in values)
            self.engine.execute(
                f"UPDATE {self._table} SET {assignments} WHERE id = ?",
                (*values.values(), entity.id),
            )
            logger.debug("Updated %s id=%s", self.entity.table_name, entity.id)
        return entity
