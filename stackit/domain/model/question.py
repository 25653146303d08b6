"""Question entity."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import QuestionId, TagName, UserId


class Question(DomainModel):
    """Question entity.

    A question asked by a user, categorized by one to five tags.
    The author is the only user allowed to accept one of its answers.
    """

    id: QuestionId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    tag_names: list[TagName] = Field(min_length=1, max_length=5)
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
