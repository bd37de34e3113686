"""forum-orm - a small table-driven object mapper for a Q&A forum."""

from __future__ import annotations

from forum_orm.core.connection import ConnectionConfig, ConnectionManager
from forum_orm.core.engine import Engine
from forum_orm.core.exceptions import (
    AdapterError,
    ColumnMismatchError,
    ConnectionError,  # noqa: A004
    ConstraintViolationError,
    DuplicateQueryError,
    ExecutionError,
    ForumORMError,
    MalformedDynamicQueryError,
    MappingError,
    MultipleRowsError,
    QueryNotFoundError,
    RegistryError,
    StatementError,
    UnknownAttributeError,
)
from forum_orm.core.registry import SQLRegistry
from forum_orm.domain.entities import Entity, Question, QuestionFollow, QuestionLike, Reply, User
from forum_orm.forum import Forum
from forum_orm.mapping.model import ModelMapper
from forum_orm.repository import (
    QuestionFollowRepository,
    QuestionLikeRepository,
    QuestionRepository,
    ReplyRepository,
    Repository,
    UserRepository,
)

__all__ = [
    # Connection
    "ConnectionConfig",
    "ConnectionManager",
    # Engine
    "Engine",
    "Forum",
    # Registry
    "SQLRegistry",
    # Mapping
    "ModelMapper",
    # Entities
    "Entity",
    "User",
    "Question",
    "Reply",
    "QuestionFollow",
    "QuestionLike",
    # Repositories
    "Repository",
    "UserRepository",
    "QuestionRepository",
    "ReplyRepository",
    "QuestionFollowRepository",
    "QuestionLikeRepository",
    # Exceptions
    "ForumORMError",
    "RegistryError",
    "QueryNotFoundError",
    "DuplicateQueryError",
    "ExecutionError",
    "MultipleRowsError",
    "StatementError",
    "ConstraintViolationError",
    "MappingError",
    "ColumnMismatchError",
    "UnknownAttributeError",
    "MalformedDynamicQueryError",
    "AdapterError",
    "ConnectionError",
]
