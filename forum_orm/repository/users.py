"""User repository."""

from __future__ import annotations

from forum_orm.domain.entities import Question, Reply, User
from forum_orm.repository.base import Repository
from forum_orm.repository.follows import QuestionFollowRepository
from forum_orm.repository.likes import QuestionLikeRepository


class UserRepository(Repository[User]):
    entity = User

    def find_by_name(self, fname: str, lname: str) -> User | None:
        """First user with this first and last name, or None."""
        users = self.engine.fetch_all(
            "SELECT * FROM users WHERE fname = ? AND lname = ? ORDER BY id LIMIT 1",
            (fname, lname),
            mapper=self.mapper,
        )
        return users[0] if users else None

    def authored_questions(self, user: User) -> list[Question]:
        if user.id is None:
            return []
        return self.related(Question).find_where(author_id=user.id)

    def authored_replies(self, user: User) -> list[Reply]:
        if user.id is None:
            return []
        return self.related(Reply).find_where(author_id=user.id)

    def followed_questions(self, user: User) -> list[Question]:
        return QuestionFollowRepository(self.engine).followed_questions_for_user(user.id)

    def liked_questions(self, user: User) -> list[Question]:
        return QuestionLikeRepository(self.engine).liked_questions_for_user(user.id)

    def average_karma(self, user: User) -> float:
        """Likes received per authored question.

        A real-valued mean over distinct questions; 0.0 when the user has
        asked nothing.
        """
        average = self.engine.fetch_scalar("users.average_karma", {"user_id": user.id})
        return float(average) if average is not None else 0.0
