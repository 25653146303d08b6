"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    QuestionId,
    UserId,
    VoteId,
)
from stackit.domain.value.types import (
    TagName,
    UserRole,
    VotableType,
    VoteAction,
    VoteTally,
    VoteTarget,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    # Types
    "TagName",
    "UserRole",
    "VoteType",
    "VoteAction",
    "VotableType",
    "VoteTarget",
    "VoteTally",
]
