"""Delete question and answer use cases."""

from typing import Optional

from pydantic import BaseModel

from stackit.application.usecase.admin.base import (
    ModerationResponse,
    authorize_admin,
)
from stackit.application.usecase.base import BaseUseCase, parse_id
from stackit.domain.error import InvalidArgumentError
from stackit.domain.repository import UnitOfWork
from stackit.domain.service import ModerationService
from stackit.domain.value import AnswerId, QuestionId


class DeleteQuestionRequest(BaseModel):
    admin_id: Optional[str]
    question_id: Optional[str]


class DeleteAnswerRequest(BaseModel):
    admin_id: Optional[str]
    answer_id: Optional[str]


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for an admin deleting a question with all its answers and votes."""

    def __init__(
        self, moderation_service: ModerationService, unit_of_work: UnitOfWork
    ) -> None:
        self.moderation_service = moderation_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: DeleteQuestionRequest) -> ModerationResponse:
        """Execute delete question flow.

        Raises:
            NotAuthenticatedError: If no caller ID is given
            AdminRequiredError: If the caller is not an admin
            InvalidArgumentError: If the question ID is missing or malformed
            NotFoundError: If the question does not exist
        """
        raw_question_id = parse_id(request.question_id, "questionId")

        async with self.unit_of_work:
            await authorize_admin(self.moderation_service, request.admin_id)
            if raw_question_id is None:
                raise InvalidArgumentError("Question ID is required")
            await self.moderation_service.delete_question(QuestionId(raw_question_id))

        return ModerationResponse(message="Question deleted successfully")


class DeleteAnswerUseCase(BaseUseCase):
    """Use case for an admin deleting an answer and its votes."""

    def __init__(
        self, moderation_service: ModerationService, unit_of_work: UnitOfWork
    ) -> None:
        self.moderation_service = moderation_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: DeleteAnswerRequest) -> ModerationResponse:
        """Execute delete answer flow.

        Raises:
            NotAuthenticatedError: If no caller ID is given
            AdminRequiredError: If the caller is not an admin
            InvalidArgumentError: If the answer ID is missing or malformed
            NotFoundError: If the answer does not exist
        """
        raw_answer_id = parse_id(request.answer_id, "answerId")

        async with self.unit_of_work:
            await authorize_admin(self.moderation_service, request.admin_id)
            if raw_answer_id is None:
                raise InvalidArgumentError("Answer ID is required")
            await self.moderation_service.delete_answer(AnswerId(raw_answer_id))

        return ModerationResponse(message="Answer deleted successfully")
