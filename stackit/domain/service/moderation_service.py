"""Moderation domain service."""

from datetime import datetime, timedelta

import logfire

from stackit.domain.error import AdminRequiredError, NotFoundError
from stackit.domain.model.user import User
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.value import AnswerId, QuestionId, UserId, UserRole, VoteTarget
from stackit.domain.value.common import ValueObject

from .base import Service

# Window for the "today" counters of the overview
RECENT_WINDOW = timedelta(hours=24)


class ModerationOverview(ValueObject):
    """Site-wide counters for the admin dashboard."""

    total_users: int
    total_questions: int
    total_answers: int
    total_admins: int
    questions_today: int
    answers_today: int


class ModerationService(Service):
    """Domain service for admin moderation.

    Deletes cascade explicitly through the vote ledger: votes on a deleted
    question or answer are removed with it, and deleting an accepted answer
    leaves its question without one. PostgreSQL foreign keys cascade the
    same way, so the explicit deletes find nothing left there.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize moderation service.

        Args:
            user_repository: User repository
            question_repository: Question repository
            answer_repository: Answer repository
            vote_repository: Vote repository
        """
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.vote_repository = vote_repository

    async def require_admin(self, user_id: UserId) -> User:
        """Load a user and check they hold the admin role.

        The role is read from the store on every call, so demoting an admin
        takes effect immediately.

        Raises:
            AdminRequiredError: If the user is unknown or not an admin
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None or not user.is_admin:
            logfire.warn("Admin access denied", user_id=str(user_id))
            raise AdminRequiredError(str(user_id))
        return user

    async def delete_question(self, question_id: QuestionId) -> None:
        """Delete a question with its answers and every vote on them.

        The question is locked first, so a concurrent accept on it either
        finishes before the delete or finds the question gone.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "moderation_service.delete_question", question_id=str(question_id)
        ):
            async with self.question_repository.lock(question_id) as question:
                if question is None:
                    raise NotFoundError("Question", str(question_id))

                answers = await self.answer_repository.find_by_question(question_id)
                removed_votes = 0
                for answer in answers:
                    removed_votes += await self.vote_repository.delete_by_target(
                        VoteTarget(answer_id=answer.id)
                    )
                    await self.answer_repository.delete(answer.id)

                removed_votes += await self.vote_repository.delete_by_target(
                    VoteTarget(question_id=question_id)
                )
                await self.question_repository.delete(question_id)

            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                answers=len(answers),
                votes=removed_votes,
            )

    async def delete_answer(self, answer_id: AnswerId) -> None:
        """Delete an answer and every vote on it.

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span("moderation_service.delete_answer", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if answer is None:
                raise NotFoundError("Answer", str(answer_id))

            # Same lock as acceptance, so the accepted flag cannot move
            # onto this answer while it is being deleted
            async with self.question_repository.lock(answer.question_id):
                removed_votes = await self.vote_repository.delete_by_target(
                    VoteTarget(answer_id=answer_id)
                )
                deleted = await self.answer_repository.delete(answer_id)

            if not deleted:
                raise NotFoundError("Answer", str(answer_id))

            logfire.info(
                "Answer deleted",
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
                was_accepted=answer.is_accepted,
                votes=removed_votes,
            )

    async def remove_user(self, user_id: UserId) -> None:
        """Remove a user with their questions, answers and votes.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("moderation_service.remove_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise NotFoundError("User", str(user_id))

            question_ids = await self.question_repository.find_ids_by_author(user_id)
            for question_id in question_ids:
                await self.delete_question(question_id)

            # Answers on other users' questions; those on the user's own
            # questions are already gone
            answer_ids = await self.answer_repository.find_ids_by_author(user_id)
            for answer_id in answer_ids:
                await self.delete_answer(answer_id)

            removed_votes = await self.vote_repository.delete_by_user(user_id)
            await self.user_repository.delete(user_id)

            logfire.info(
                "User removed",
                user_id=str(user_id),
                questions=len(question_ids),
                answers=len(answer_ids),
                votes=removed_votes,
            )

    async def set_role(self, user_id: UserId, role: UserRole) -> User:
        """Change a user's role.

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "moderation_service.set_role", user_id=str(user_id), role=role.value
        ):
            user = await self.user_repository.set_role(user_id, role)
            if user is None:
                raise NotFoundError("User", str(user_id))

            logfire.info("User role changed", user_id=str(user_id), role=role.value)
            return user

    async def get_overview(self) -> ModerationOverview:
        """Count users, content, admins and the last day's activity."""
        with logfire.span("moderation_service.get_overview"):
            since = datetime.now() - RECENT_WINDOW
            return ModerationOverview(
                total_users=await self.user_repository.count(),
                total_questions=await self.question_repository.count(),
                total_answers=await self.answer_repository.count(),
                total_admins=await self.user_repository.count(role=UserRole.ADMIN),
                questions_today=await self.question_repository.count(since=since),
                answers_today=await self.answer_repository.count(since=since),
            )

    async def list_users(self, limit: int = 50) -> list[User]:
        """List users, newest first."""
        with logfire.span("moderation_service.list_users", limit=limit):
            return await self.user_repository.find_recent(limit)
