"""List questions use case."""

import math
from typing import Optional

import logfire
from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase, CamelModel
from stackit.config import PaginationSettings
from stackit.domain.service import QuestionService

from .create_question import QuestionResponse


class ListQuestionsRequest(BaseModel):
    """List questions request.

    Out-of-range paging values are clamped rather than rejected.
    """

    page: Optional[int] = None
    limit: Optional[int] = None
    tag: Optional[str] = None  # Substring of a tag name
    search: Optional[str] = None  # Substring of title or description


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class ListQuestionsResponse(CamelModel):
    """List questions response."""

    questions: list[QuestionResponse]
    pagination: Pagination


class ListQuestionsUseCase(BaseUseCase):
    """Use case for listing questions, newest first."""

    def __init__(
        self, question_service: QuestionService, pagination: PaginationSettings
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            pagination: Default and maximum page sizes
        """
        self.question_service = question_service
        self.pagination = pagination

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Paging and filter parameters

        Returns:
            The requested page and pagination metadata
        """
        page = max(request.page or 1, 1)
        limit = request.limit or self.pagination.default_limit
        limit = min(max(limit, 1), self.pagination.max_limit)

        tag = request.tag.strip() if request.tag else None
        search = request.search.strip() if request.search else None

        with logfire.span(
            "list_questions.execute", page=page, limit=limit, tag=tag, search=search
        ):
            questions, total = await self.question_service.list_questions(
                tag=tag or None,
                search=search or None,
                limit=limit,
                offset=(page - 1) * limit,
            )

            logfire.info("Questions listed", count=len(questions), total=total)

            return ListQuestionsResponse(
                questions=[QuestionResponse.from_question(q) for q in questions],
                pagination=Pagination(
                    page=page,
                    limit=limit,
                    total=total,
                    pages=math.ceil(total / limit),
                ),
            )
