"""Repository layer - generic entity mapping and forum traversals."""

from __future__ import annotations

from forum_orm.repository.base import Repository
from forum_orm.repository.follows import QuestionFollowRepository
from forum_orm.repository.likes import QuestionLikeRepository
from forum_orm.repository.questions import QuestionRepository
from forum_orm.repository.replies import ReplyRepository
from forum_orm.repository.users import UserRepository

__all__ = [
    "Repository",
    "UserRepository",
    "QuestionRepository",
    "ReplyRepository",
    "QuestionFollowRepository",
    "QuestionLikeRepository",
]
