"""Unit tests for dynamic finder name parsing."""

from __future__ import annotations

import pytest

from forum_orm.core.exceptions import MalformedDynamicQueryError
from forum_orm.repository.finders import is_finder_name, parse_finder_name

USER_ATTRIBUTES = {"id", "fname", "lname"}
REPLY_ATTRIBUTES = {"id", "parent_id", "question_id", "author_id", "user_id", "body"}


class TestParseFinderName:
    def test_single_attribute(self) -> None:
        assert parse_finder_name("find_by_fname", USER_ATTRIBUTES) == ["fname"]

    def test_and_joined_attributes(self) -> None:
        assert parse_finder_name("find_by_fname_and_lname", USER_ATTRIBUTES) == [
            "fname",
            "lname",
        ]

    def test_and_token_is_case_insensitive(self) -> None:
        assert parse_finder_name("find_by_fname_AND_lname", USER_ATTRIBUTES) == [
            "fname",
            "lname",
        ]

    def test_and_token_is_optional(self) -> None:
        assert parse_finder_name("find_by_lname_fname", USER_ATTRIBUTES) == ["lname", "fname"]

    def test_multi_word_attributes(self) -> None:
        assert parse_finder_name("find_by_question_id_and_author_id", REPLY_ATTRIBUTES) == [
            "question_id",
            "author_id",
        ]

    def test_column_name_is_accepted(self) -> None:
        assert parse_finder_name("find_by_user_id", REPLY_ATTRIBUTES) == ["user_id"]

    def test_unknown_attribute(self) -> None:
        with pytest.raises(MalformedDynamicQueryError, match="email"):
            parse_finder_name("find_by_email", USER_ATTRIBUTES)

    def test_missing_prefix(self) -> None:
        with pytest.raises(MalformedDynamicQueryError):
            parse_finder_name("lookup_fname", USER_ATTRIBUTES)

    def test_empty_token(self) -> None:
        with pytest.raises(MalformedDynamicQueryError):
            parse_finder_name("find_by_fname__lname", USER_ATTRIBUTES)

    def test_only_and(self) -> None:
        with pytest.raises(MalformedDynamicQueryError):
            parse_finder_name("find_by_and", USER_ATTRIBUTES)


class TestIsFinderName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("find_by_fname", True),
            ("find_by_", False),
            ("find_all", False),
            ("__deepcopy__", False),
        ],
    )
    def test_is_finder_name(self, name: str, expected: bool) -> None:
        assert is_finder_name(name) is expected
