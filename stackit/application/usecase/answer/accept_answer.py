"""Accept answer use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase, CamelModel, parse_id
from stackit.domain.error import (
    InvalidArgumentError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)
from stackit.domain.repository import UnitOfWork
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import AnswerId, QuestionId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    user_id: Optional[str]  # Current user ID (must be the question author)
    answer_id: Optional[str]
    question_id: Optional[str]


class AcceptAnswerResponse(CamelModel):
    """Accept answer response."""

    success: bool
    is_accepted: bool
    message: str


class AcceptAnswerUseCase(BaseUseCase):
    """Use case for accepting (or unaccepting) an answer to one's question."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize accept answer use case.

        Args:
            question_service: Question service
            answer_service: Answer service
            unit_of_work: Transaction the acceptance is committed in
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Args:
            request: Accept request with caller, answer and question IDs

        Returns:
            The answer's new acceptance state

        Raises:
            NotAuthenticatedError: If no user ID is given
            InvalidArgumentError: If IDs are missing, malformed or mismatched
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the caller did not ask the question
        """
        if not request.user_id:
            raise NotAuthenticatedError("accept answers")

        raw_question_id = parse_id(request.question_id, "questionId")
        raw_answer_id = parse_id(request.answer_id, "answerId")
        if raw_question_id is None or raw_answer_id is None:
            raise InvalidArgumentError("Answer ID and Question ID are required")

        user_id = UserId(UUID(request.user_id))
        question_id = QuestionId(raw_question_id)
        answer_id = AnswerId(raw_answer_id)

        async with self.unit_of_work:
            # 1. Question must exist
            question = await self.question_service.get_question_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))

            # 2. Only the question author may accept (the author never
            #    changes, so this check does not need the question lock)
            if question.author_id != user_id:
                raise NotAuthorizedError("question", str(question_id), str(user_id))

            # 3. Toggle under the question lock, released on commit
            is_accepted = await self.answer_service.toggle_accepted(
                question_id, answer_id
            )

        return AcceptAnswerResponse(
            success=True,
            is_accepted=is_accepted,
            message=(
                "Answer accepted successfully"
                if is_accepted
                else "Answer unaccepted successfully"
            ),
        )
