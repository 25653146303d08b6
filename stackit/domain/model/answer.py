"""Answer entity."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer entity.

    Business rules:
    - At most one answer per question has is_accepted set
    - Only the author of the parent question may change is_accepted
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=30000)
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
