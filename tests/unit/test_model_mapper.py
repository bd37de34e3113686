"""Unit tests for ModelMapper."""

from __future__ import annotations

import pytest

from forum_orm.core.exceptions import ColumnMismatchError
from forum_orm.domain.entities import Question, Reply, User
from forum_orm.mapping.model import ModelMapper


class TestModelMapper:
    def test_map_user_row(self) -> None:
        mapper = ModelMapper(User)
        result = mapper.map_one({"id": 2, "fname": "Fred", "lname": "Sladkey"})
        assert isinstance(result, User)
        assert result.id == 2
        assert result.fname == "Fred"

    def test_column_alias_populates_attribute(self) -> None:
        mapper = ModelMapper(Question)
        row = {"id": 1, "title": "t", "body": "b", "user_id": 7}
        result = mapper.map_one(row)
        assert result.author_id == 7

    def test_nullable_columns(self) -> None:
        mapper = ModelMapper(Reply)
        row = {"id": 1, "parent_id": None, "question_id": 1, "user_id": 2, "body": "42"}
        result = mapper.map_one(row)
        assert result.parent_id is None
        assert result.author_id == 2

    def test_missing_column_fails(self) -> None:
        mapper = ModelMapper(User)
        with pytest.raises(ColumnMismatchError) as excinfo:
            mapper.map_one({"id": 1, "fname": "Fred"})
        assert excinfo.value.target_class == "User"
        assert any("lname" in problem for problem in excinfo.value.problems)

    def test_unexpected_column_fails(self) -> None:
        mapper = ModelMapper(User)
        with pytest.raises(ColumnMismatchError):
            mapper.map_one({"id": 1, "fname": "Fred", "lname": "Sladkey", "age": 3})

    def test_wrong_type_fails(self) -> None:
        mapper = ModelMapper(Reply)
        row = {"id": 1, "parent_id": "root", "question_id": 1, "user_id": 2, "body": "x"}
        with pytest.raises(ColumnMismatchError):
            mapper.map_one(row)

    def test_attribute_name_also_accepted(self) -> None:
        mapper = ModelMapper(Question)
        result = mapper.map_one({"id": 1, "title": "t", "body": "b", "author_id": 3})
        assert result.author_id == 3

    def test_map_many(self) -> None:
        mapper = ModelMapper(User)
        rows = [
            {"id": 1, "fname": "Scott", "lname": "Dikowitz"},
            {"id": 2, "fname": "Fred", "lname": "Sladkey"},
        ]
        results = mapper.map_many(rows)
        assert [u.id for u in results] == [1, 2]

    def test_map_many_empty(self) -> None:
        assert ModelMapper(User).map_many([]) == []
