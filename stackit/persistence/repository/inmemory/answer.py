"""In-memory answer repository for testing."""

import asyncio
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from stackit.domain.model.answer import Answer
from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing.

    Mirrors the database's partial unique index: setting a second accepted
    answer on a question raises IntegrityError. Single-answer lookups yield
    to the event loop after reading, like a database round trip.
    """

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        found = self._answers.get(answer_id)
        await asyncio.sleep(0)
        return found

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, oldest first."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        return answers

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        return sum(1 for a in self._answers.values() if a.question_id == question_id)

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for many questions at once."""
        wanted = set(question_ids)
        counts: dict[QuestionId, int] = {}
        for answer in self._answers.values():
            if answer.question_id in wanted:
                counts[answer.question_id] = counts.get(answer.question_id, 0) + 1
        return counts

    async def count(self, since: Optional[datetime] = None) -> int:
        """Count all answers, optionally only those created since a time."""
        return sum(
            1
            for a in self._answers.values()
            if since is None or a.created_at >= since
        )

    async def find_recent(self, limit: int = 20) -> list[Answer]:
        """Find answers across all questions, newest first."""
        answers = sorted(
            self._answers.values(), key=lambda a: a.created_at, reverse=True
        )
        return answers[:limit]

    async def find_ids_by_author(self, author_id: UserId) -> list[AnswerId]:
        """Find the IDs of all answers written by a user."""
        return [a.id for a in self._answers.values() if a.author_id == author_id]

    def _accepted_of(self, question_id: QuestionId) -> Optional[Answer]:
        for answer in self._answers.values():
            if answer.question_id == question_id and answer.is_accepted:
                return answer
        return None

    async def find_accepted(self, question_id: QuestionId) -> Optional[Answer]:
        """Find the accepted answer of a question, if any."""
        found = self._accepted_of(question_id)
        await asyncio.sleep(0)
        return found

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = answer
        return answer

    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set or clear the accepted flag of one answer."""
        answer = self._answers.get(answer_id)
        if answer is None:
            return

        if is_accepted:
            current = self._accepted_of(answer.question_id)
            if current is not None and current.id != answer_id:
                raise IntegrityError(
                    "Question already has an accepted answer", None, Exception()
                )

        self._answers[answer_id] = answer.evolve(is_accepted=is_accepted)

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer."""
        return self._answers.pop(answer_id, None) is not None
