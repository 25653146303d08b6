"""Track question view use case."""

from typing import Optional

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase, CamelModel, parse_id
from stackit.domain.error import InvalidArgumentError
from stackit.domain.repository import UnitOfWork
from stackit.domain.service import QuestionService
from stackit.domain.value import QuestionId


class TrackViewRequest(BaseModel):
    question_id: Optional[str]


class TrackViewResponse(CamelModel):
    success: bool
    views: int


class TrackViewUseCase(BaseUseCase):
    """Use case for counting a view of a question. Needs no authentication."""

    def __init__(
        self, question_service: QuestionService, unit_of_work: UnitOfWork
    ) -> None:
        self.question_service = question_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: TrackViewRequest) -> TrackViewResponse:
        """Execute track view flow.

        Raises:
            InvalidArgumentError: If the question ID is missing or malformed
            NotFoundError: If the question does not exist
        """
        raw_question_id = parse_id(request.question_id, "questionId")
        if raw_question_id is None:
            raise InvalidArgumentError("Question ID is required")

        async with self.unit_of_work:
            views = await self.question_service.record_view(
                QuestionId(raw_question_id)
            )
        return TrackViewResponse(success=True, views=views)
