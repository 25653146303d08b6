"""Domain model entities for StackIt."""

from stackit.domain.model.answer import Answer
from stackit.domain.model.question import Question
from stackit.domain.model.user import User
from stackit.domain.model.vote import Vote

__all__ = [
    "Question",
    "Answer",
    "User",
    "Vote",
]
