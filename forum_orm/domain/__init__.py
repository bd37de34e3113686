"""Domain layer - forum entities."""

from __future__ import annotations

from forum_orm.domain.entities import Entity, Question, QuestionFollow, QuestionLike, Reply, User

__all__ = [
    "Entity",
    "User",
    "Question",
    "Reply",
    "QuestionFollow",
    "QuestionLike",
]
