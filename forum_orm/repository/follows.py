"""Question follow queries.

Traversals across ``question_follows`` between users and questions.
"""

from __future__ import annotations

from forum_orm.domain.entities import Question, QuestionFollow, User
from forum_orm.mapping.model import ModelMapper
from forum_orm.repository.base import Repository


class QuestionFollowRepository(Repository[QuestionFollow]):
    entity = QuestionFollow

    def followers_for_question(self, question_id: int) -> list[User]:
        """Distinct users following the question."""
        return self.engine.fetch_all(
            "question_follows.followers_for_question",
            {"question_id": question_id},
            mapper=ModelMapper(User),
        )

    def followed_questions_for_user(self, user_id: int) -> list[Question]:
        return self.engine.fetch_all(
            "question_follows.followed_questions_for_user",
            {"user_id": user_id},
            mapper=ModelMapper(Question),
        )

    def most_followed_questions(self, n: int) -> list[Question]:
        """Top ``n`` questions by follower count; equal counts by ascending id."""
        return self.engine.fetch_all(
            "question_follows.most_followed",
            {"n": n},
            mapper=ModelMapper(Question),
        )

    def follow(self, user: User, question: Question) -> QuestionFollow:
        return self.save(QuestionFollow(user_id=user.id, question_id=question.id))
