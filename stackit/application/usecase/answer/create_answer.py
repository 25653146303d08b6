"""Create answer use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase, CamelModel, parse_id
from stackit.domain.error import (
    InvalidArgumentError,
    NotAuthenticatedError,
    NotFoundError,
)
from stackit.domain.model import Answer
from stackit.domain.repository import UnitOfWork
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    author_id: Optional[str]  # User ID from authenticated user
    question_id: Optional[str]
    content: Optional[str]


class AnswerResponse(CamelModel):
    """Answer details."""

    id: str
    question_id: str
    author_id: str
    content: str
    is_accepted: bool
    created_at: datetime

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerResponse":
        return cls(
            id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            content=answer.content,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
        )


class CreateAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.question_service = question_service
        self.answer_service = answer_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateAnswerRequest) -> AnswerResponse:
        """Execute create answer flow.

        Raises:
            NotAuthenticatedError: If no author ID is given
            InvalidArgumentError: If content or question ID is missing
            NotFoundError: If the question does not exist
        """
        if not request.author_id:
            raise NotAuthenticatedError("answer questions")

        raw_question_id = parse_id(request.question_id, "questionId")
        if not request.content or raw_question_id is None:
            raise InvalidArgumentError("Content and questionId are required")

        question_id = QuestionId(raw_question_id)
        async with self.unit_of_work:
            question = await self.question_service.get_question_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))

            answer = await self.answer_service.create_answer(
                question_id=question_id,
                author_id=UserId(UUID(request.author_id)),
                content=request.content,
            )
        return AnswerResponse.from_answer(answer)
