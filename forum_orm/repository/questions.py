"""Question repository."""

from __future__ import annotations

from forum_orm.domain.entities import Question, Reply, User
from forum_orm.repository.base import Repository
from forum_orm.repository.follows import QuestionFollowRepository
from forum_orm.repository.likes import QuestionLikeRepository


class QuestionRepository(Repository[Question]):
    entity = Question

    def author(self, question: Question) -> User | None:
        if question.author_id is None:
            return None
        return self.related(User).find_by_id(question.author_id)

    def replies(self, question: Question) -> list[Reply]:
        if question.id is None:
            return []
        return self.related(Reply).find_where(question_id=question.id)

    def followers(self, question: Question) -> list[User]:
        return self._follows.followers_for_question(question.id)

    def likers(self, question: Question) -> list[User]:
        return self._likes.likers_for_question(question.id)

    def num_likes(self, question: Question) -> int:
        return self._likes.num_likes_for_question(question.id)

    def most_followed(self, n: int) -> list[Question]:
        return self._follows.most_followed_questions(n)

    def most_liked(self, n: int) -> list[Question]:
        return self._likes.most_liked_questions(n)

    @property
    def _follows(self) -> QuestionFollowRepository:
        return QuestionFollowRepository(self.engine)

    @property
    def _likes(self) -> QuestionLikeRepository:
        return QuestionLikeRepository(self.engine)
