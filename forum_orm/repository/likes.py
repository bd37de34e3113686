"""Question like queries.

Likes are not unique per user: every row counts toward a question's total.
"""

from __future__ import annotations

from forum_orm.domain.entities import Question, QuestionLike, User
from forum_orm.mapping.model import ModelMapper
from forum_orm.repository.base import Repository


class QuestionLikeRepository(Repository[QuestionLike]):
    entity = QuestionLike

    def likers_for_question(self, question_id: int) -> list[User]:
        """Distinct users who liked the question."""
        return self.engine.fetch_all(
            "question_likes.likers_for_question",
            {"question_id": question_id},
            mapper=ModelMapper(User),
        )

    def num_likes_for_question(self, question_id: int) -> int:
        """Number of like rows for the question; 0 when there are none."""
        count = self.engine.fetch_scalar(
            "question_likes.num_likes_for_question",
            {"question_id": question_id},
        )
        return int(count or 0)

    def liked_questions_for_user(self, user_id: int) -> list[Question]:
        return self.engine.fetch_all(
            "question_likes.liked_questions_for_user",
            {"user_id": user_id},
            mapper=ModelMapper(Question),
        )

    def most_liked_questions(self, n: int) -> list[Question]:
        """Top ``n`` questions by like count; equal counts by ascending id."""
        return self.engine.fetch_all(
            "question_likes.most_liked",
            {"n": n},
            mapper=ModelMapper(Question),
        )

    def like(self, user: User, question: Question) -> QuestionLike:
        return self.save(QuestionLike(user_id=user.id, question_id=question.id))
