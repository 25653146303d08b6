"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from stackit.config import AuthSettings
from stackit.domain.model import Answer, Question, User
from stackit.domain.value import AnswerId, QuestionId, TagName, UserId, UserRole

# Keep instrumentation quiet and local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_question(
    author_id: UserId | None = None,
    title: str = "How do I reverse a list in Python?",
    tags: list[str] | None = None,
    created_at: datetime | None = None,
) -> Question:
    """Build a valid question for tests."""
    return Question(
        id=QuestionId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        title=title,
        description="I have a list and want it backwards.",
        tag_names=[TagName(t) for t in (tags or ["python"])],
        views=0,
        created_at=created_at or datetime.now(),
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId | None = None,
    content: str = "Use reversed() or slice with [::-1].",
    is_accepted: bool = False,
    age: timedelta = timedelta(0),
) -> Answer:
    """Build a valid answer for tests; ``age`` backdates created_at."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id or UserId(uuid4()),
        content=content,
        is_accepted=is_accepted,
        created_at=datetime.now() - age,
    )



def make_user(
    user_id: UserId | None = None, role: UserRole = UserRole.USER
) -> User:
    """Build a valid user for tests."""
    user_id = user_id or UserId(uuid4())
    return User(id=user_id, handle=f"user-{str(user_id)[:8]}", role=role)

@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed test secret."""
    return AuthSettings(jwt_secret="test-secret-that-is-long-enough-for-hs256")
