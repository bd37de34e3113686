"""Forum facade.

Wires one Engine into every repository. The process entry point constructs
it and closes it; nothing here is global.
"""

from __future__ import annotations

from forum_orm.core.connection import ConnectionConfig
from forum_orm.core.engine import Engine
from forum_orm.core.registry import SQLRegistry
from forum_orm.repository.follows import QuestionFollowRepository
from forum_orm.repository.likes import QuestionLikeRepository
from forum_orm.repository.questions import QuestionRepository
from forum_orm.repository.replies import ReplyRepository
from forum_orm.repository.users import UserRepository


class Forum:
    """Repositories for users, questions, replies, follows and likes."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.users = UserRepository(engine)
        self.questions = QuestionRepository(engine)
        self.replies = ReplyRepository(engine)
        self.follows = QuestionFollowRepository(engine)
        self.likes = QuestionLikeRepository(engine)

    @classmethod
    def from_config(
        cls,
        config: ConnectionConfig,
        registry: SQLRegistry | None = None,
    ) -> Forum:
        return cls(Engine.from_config(config, registry))

    def close(self) -> None:
        self.engine.close()

    def __enter__(self) -> Forum:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
