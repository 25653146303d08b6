"""Moderation action use case."""

from enum import Enum
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
from stackit.domain.value import AnswerId, QuestionId, UserId


class ModerationAction(str, Enum):
    """Actions the moderation endpoint accepts.

    Hiding removes the content, the same as deleting it.
    """

    BAN_USER = "ban_user"
    HIDE_QUESTION = "hide_question"
    HIDE_ANSWER = "hide_answer"


class ModerateRequest(BaseModel):
    """Moderation request; the ID matching the action is required."""

    admin_id: Optional[str]
    action: Optional[str]
    user_id: Optional[str] = None
    question_id: Optional[str] = None
    answer_id: Optional[str] = None


class ModerateUseCase(BaseUseCase):
    """Use case for admin moderation actions."""

    def __init__(
        self, moderation_service: ModerationService, unit_of_work: UnitOfWork
    ) -> None:
        self.moderation_service = moderation_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: ModerateRequest) -> ModerationResponse:
        """Execute a moderation action.

        Raises:
            NotAuthenticatedError: If no caller ID is given
            AdminRequiredError: If the caller is not an admin
            InvalidArgumentError: If the action is unknown or its ID is missing
            NotFoundError: If the user, question or answer does not exist
        """
        async with self.unit_of_work:
            await authorize_admin(self.moderation_service, request.admin_id)

            try:
                action = ModerationAction(request.action)
            except ValueError:
                raise InvalidArgumentError("Invalid action")

            if action is ModerationAction.BAN_USER:
                user_id = parse_id(request.user_id, "userId")
                if user_id is None:
                    raise InvalidArgumentError("User ID is required")
                await self.moderation_service.remove_user(UserId(user_id))
                message = "User banned successfully"
            elif action is ModerationAction.HIDE_QUESTION:
                question_id = parse_id(request.question_id, "questionId")
                if question_id is None:
                    raise InvalidArgumentError("Question ID is required")
                await self.moderation_service.delete_question(QuestionId(question_id))
                message = "Question hidden successfully"
            else:
                answer_id = parse_id(request.answer_id, "answerId")
                if answer_id is None:
                    raise InvalidArgumentError("Answer ID is required")
                await self.moderation_service.delete_answer(AnswerId(answer_id))
                message = "Answer hidden successfully"

        return ModerationResponse(message=message)
