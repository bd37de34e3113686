"""Forum entities.

Each entity is a detached, mutable snapshot of one row. ``table_name`` names
the backing table; a field whose column name differs from the attribute
name declares the column as its alias.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Base for all mapped entities."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    table_name: ClassVar[str]

    id: int | None = None

    @classmethod
    def column_map(cls) -> dict[str, str]:
        """Attribute name -> column name, in declaration order."""
        return {name: field.alias or name for name, field in cls.model_fields.items()}

    @classmethod
    def column_for(cls, name: str) -> str | None:
        """Resolve an attribute or column name to its column, or None."""
        columns = cls.column_map()
        if name in columns:
            return columns[name]
        if name in columns.values():
            return name
        return None

    @property
    def is_new(self) -> bool:
        return self.id is None

    def column_values(self) -> dict[str, Any]:
        """Column -> value for every non-id column, in declaration order."""
        # Unvalidated assignments (e.g. None into a str field) are left for
        # the storage constraints to reject.
        return self.model_dump(by_alias=True, exclude={"id"}, warnings=False)


class User(Entity):
    table_name: ClassVar[str] = "users"

    fname: str
    lname: str


class Question(Entity):
    table_name: ClassVar[str] = "questions"

    title: str
    body: str
    author_id: int | None = Field(default=None, alias="user_id")


class Reply(Entity):
    """A reply to a question; replies with a parent form a thread."""

    table_name: ClassVar[str] = "replies"

    parent_id: int | None = None
    question_id: int | None = None
    author_id: int = Field(alias="user_id")
    body: str


class QuestionFollow(Entity):
    table_name: ClassVar[str] = "question_follows"

    user_id: int | None = None
    question_id: int | None = None


class QuestionLike(Entity):
    table_name: ClassVar[str] = "question_likes"

    user_id: int | None = None
    question_id: int | None = None
