"""Create question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase, CamelModel
from stackit.domain.error import InvalidArgumentError, NotAuthenticatedError
from stackit.domain.model import Question
from stackit.domain.repository import UnitOfWork
from stackit.domain.service import QuestionService
from stackit.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: Optional[str]  # User ID from authenticated user
    title: Optional[str]
    description: Optional[str]
    tags: Optional[list[str]]


class QuestionResponse(CamelModel):
    """Question details."""

    id: str
    author_id: str
    title: str
    description: str
    tags: list[str]
    views: int
    created_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=str(question.id),
            author_id=str(question.author_id),
            title=question.title,
            description=question.description,
            tags=[tag.root for tag in question.tag_names],
            views=question.views,
            created_at=question.created_at,
        )


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            unit_of_work: Transaction the question is committed in
        """
        self.question_service = question_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CreateQuestionRequest) -> QuestionResponse:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            Created question

        Raises:
            NotAuthenticatedError: If no author ID is given
            InvalidArgumentError: If title, description or tags are missing
                or invalid
        """
        if not request.author_id:
            raise NotAuthenticatedError("ask questions")

        if not request.title or not request.description or not request.tags:
            raise InvalidArgumentError("Title, description, and tags are required")

        async with self.unit_of_work:
            question = await self.question_service.create_question(
                author_id=UserId(UUID(request.author_id)),
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
        return QuestionResponse.from_question(question)
