"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import field_validator, model_validator

from stackit.domain.error import InvalidArgumentError
from stackit.domain.value.common import RootValueObject, ValueObject
from stackit.domain.value.identifiers import AnswerId, QuestionId


class VoteType(str, Enum):
    """Polarity of a vote."""

    UP = "UP"
    DOWN = "DOWN"

    @classmethod
    def parse(cls, value: Optional[str]) -> "VoteType":
        """Parse a wire value into a vote type.

        Raises:
            InvalidArgumentError: If the value is not UP or DOWN
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError("Invalid vote type")

    @property
    def weight(self) -> int:
        """Contribution of one vote of this type to a score."""
        return 1 if self is VoteType.UP else -1


class VoteAction(str, Enum):
    """What a cast vote did to the caller's existing vote."""

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, value: Optional[str]) -> "UserRole":
        """Parse a wire value into a role.

        Raises:
            InvalidArgumentError: If the value is not USER or ADMIN
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError("Invalid role. Must be USER or ADMIN")


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class VoteTarget(ValueObject):
    """Exactly one question or answer a vote is attached to."""

    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None

    @model_validator(mode="after")
    def validate_single_target(self) -> "VoteTarget":
        """Exactly one of question_id and answer_id must be set."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("Exactly one of question_id or answer_id is required")
        return self

    @classmethod
    def from_ids(
        cls,
        question_id: Optional[UUID] = None,
        answer_id: Optional[UUID] = None,
    ) -> "VoteTarget":
        """Build a target from optional ids.

        Raises:
            InvalidArgumentError: If both or neither ids are given
        """
        if question_id is None and answer_id is None:
            raise InvalidArgumentError("Either questionId or answerId is required")
        if question_id is not None and answer_id is not None:
            raise InvalidArgumentError(
                "Cannot vote on both question and answer simultaneously"
            )
        if question_id is not None:
            return cls(question_id=QuestionId(question_id))
        return cls(answer_id=AnswerId(answer_id))  # type: ignore[arg-type]

    @property
    def votable_type(self) -> VotableType:
        return VotableType.QUESTION if self.question_id else VotableType.ANSWER

    @property
    def votable_id(self) -> UUID:
        return self.question_id or self.answer_id  # type: ignore[return-value]

    def __str__(self) -> str:
        return f"{self.votable_type.value}:{self.votable_id}"


class VoteTally(ValueObject):
    """Aggregate of all votes on one target.

    Derived from the vote rows on every read and never stored.
    """

    upvotes: int = 0
    downvotes: int = 0

    @property
    def score(self) -> int:
        return (
            self.upvotes * VoteType.UP.weight + self.downvotes * VoteType.DOWN.weight
        )

    @classmethod
    def from_counts(cls, counts: dict[VoteType, int]) -> "VoteTally":
        """Build a tally from per-type counts (missing types count as zero)."""
        return cls(
            upvotes=counts.get(VoteType.UP, 0),
            downvotes=counts.get(VoteType.DOWN, 0),
        )


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Must be lowercase, alphanumeric with hyphens, dots, plus or hash signs,
    1-35 characters. Examples: 'python', 'c++', 'c#', 'node.js'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not re.match(r"^[a-z0-9][a-z0-9.+#-]{0,34}$", v):
            raise ValueError(
                "Tag name must be 1-35 characters, lowercase, alphanumeric "
                "with '-', '.', '+' or '#'"
            )
        return v
