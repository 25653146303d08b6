"""Vote entity.

Votes represent community curation of questions and answers.
Each user can cast one vote (up or down) per item.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from stackit.domain.model.common import DomainModel
from stackit.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VoteId,
    VoteTarget,
    VoteType,
)


class Vote(DomainModel):
    """Vote entity.

    Represents an upvote or downvote on a question or an answer.
    Business rules:
    - One vote per user per item (enforced by database unique constraints)
    - A vote targets exactly one question or one answer, never both
    - Only the voter may flip or remove their vote
    """

    id: VoteId
    user_id: UserId
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_single_target(self) -> "Vote":
        """A vote is attached to exactly one target kind."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("Vote must target exactly one question or answer")
        return self

    @property
    def target(self) -> VoteTarget:
        return VoteTarget(question_id=self.question_id, answer_id=self.answer_id)
