"""Answer domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError

from stackit.domain.error import InvalidArgumentError, NotFoundError
from stackit.domain.model.answer import Answer
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository (for acceptance locking)
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, content: str
    ) -> Answer:
        """Create an answer to a question.

        The caller is responsible for checking that the question exists.

        Raises:
            InvalidArgumentError: If the content is empty or too long
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    question_id=question_id,
                    author_id=author_id,
                    content=content,
                    is_accepted=False,
                    created_at=datetime.now(),
                )
            except ValidationError:
                raise InvalidArgumentError("Answer content must be 1-30000 characters")

            saved = await self.answer_repository.save(answer)
            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question_id),
            )
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID.

        Args:
            answer_id: Answer ID

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if answer is None:
                logfire.warn("Answer not found", answer_id=str(answer_id))
            return answer

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Get all answers to a question, oldest first."""
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Answers retrieved for question",
                question_id=str(question_id),
                count=len(answers),
            )
            return answers

    async def count_answers(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        return await self.answer_repository.count_by_question(question_id)

    async def toggle_accepted(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> bool:
        """Accept an answer, or unaccept it if it is already accepted.

        Accepting clears the question's previously accepted answer (at most
        one exists) before setting this one. The question is locked for
        the rest of the transaction, so concurrent calls on the same
        question serialize and never leave two accepted answers.

        Authorization is the caller's responsibility.

        Args:
            question_id: Question the answer is claimed to belong to
            answer_id: Answer to toggle

        Returns:
            The answer's new is_accepted state

        Raises:
            NotFoundError: If the question or answer does not exist
            InvalidArgumentError: If the answer belongs to another question
        """
        with logfire.span(
            "answer_service.toggle_accepted",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            async with self.question_repository.lock(question_id) as question:
                if question is None:
                    raise NotFoundError("Question", str(question_id))

                answer = await self.answer_repository.find_by_id(answer_id)
                if answer is None:
                    raise NotFoundError("Answer", str(answer_id))

                if answer.question_id != question_id:
                    logfire.warn(
                        "Answer does not belong to question",
                        answer_id=str(answer_id),
                        answer_question_id=str(answer.question_id),
                        question_id=str(question_id),
                    )
                    raise InvalidArgumentError(
                        "Answer does not belong to this question"
                    )

                if answer.is_accepted:
                    await self.answer_repository.set_accepted(answer_id, False)
                    logfire.info(
                        "Answer unaccepted",
                        answer_id=str(answer_id),
                        question_id=str(question_id),
                    )
                    return False

                previous = await self.answer_repository.find_accepted(question_id)
                if previous is not None:
                    await self.answer_repository.set_accepted(previous.id, False)

                await self.answer_repository.set_accepted(answer_id, True)
                logfire.info(
                    "Answer accepted",
                    answer_id=str(answer_id),
                    question_id=str(question_id),
                    replaced_answer_id=str(previous.id) if previous else None,
                )
                return True

    async def get_recent_answers(self, limit: int = 20) -> list[Answer]:
        """Get answers across all questions, newest first."""
        with logfire.span("answer_service.get_recent_answers", limit=limit):
            return await self.answer_repository.find_recent(limit)

    async def count_answers_for(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for many questions at once (zero included)."""
        counts = await self.answer_repository.count_by_questions(question_ids)
        return {question_id: counts.get(question_id, 0) for question_id in question_ids}
