"""Row-to-entity mapper.

Rows are validated into pydantic entity models; a row with missing or
unexpected columns, or values of the wrong type, fails immediately.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from forum_orm.core.exceptions import ColumnMismatchError

T = TypeVar("T", bound=BaseModel)


class ModelMapper(Generic[T]):
    """Map row dicts onto a pydantic model via ``model_validate``.

    Column names are matched against field names and declared aliases.
    """

    def __init__(self, target_class: type[T]) -> None:
        self._target_class = target_class

    @property
    def target_class(self) -> type[T]:
        return self._target_class

    def map_one(self, row: dict[str, Any]) -> T:
        """Map a single row to a target_class instance."""
        try:
            return self._target_class.model_validate(row)
        except ValidationError as e:
            problems = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            ]
            raise ColumnMismatchError(self._target_class.__name__, problems) from e

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]
