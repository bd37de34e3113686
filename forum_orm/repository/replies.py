"""Reply repository.

Replies form a tree per question: ``parent_id`` is None for top-level
replies and points at another reply otherwise.
"""

from __future__ import annotations

from forum_orm.domain.entities import Question, Reply, User
from forum_orm.repository.base import Repository


class ReplyRepository(Repository[Reply]):
    entity = Reply

    def author(self, reply: Reply) -> User | None:
        return self.related(User).find_by_id(reply.author_id)

    def question(self, reply: Reply) -> Question | None:
        if reply.question_id is None:
            return None
        return self.related(Question).find_by_id(reply.question_id)

    def parent_reply(self, reply: Reply) -> Reply | None:
        if reply.parent_id is None:
            return None
        return self.find_by_id(reply.parent_id)

    def child_replies(self, reply: Reply) -> list[Reply]:
        if reply.id is None:
            return []
        return self.find_where(parent_id=reply.id)
