"""Answer repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first."""
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count answers for many questions at once.

        Questions without answers may be missing from the result.
        """
        pass

    @abstractmethod
    async def count(self, since: Optional[datetime] = None) -> int:
        """Count all answers, optionally only those created since a time."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 20) -> List[Answer]:
        """Find answers across all questions, newest first."""
        pass

    @abstractmethod
    async def find_ids_by_author(self, author_id: UserId) -> List[AnswerId]:
        """Find the IDs of all answers written by a user."""
        pass

    @abstractmethod
    async def find_accepted(self, question_id: QuestionId) -> Optional[Answer]:
        """Find the accepted answer of a question, if any.

        The database guarantees at most one exists.
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set or clear the accepted flag of one answer.

        Raises:
            IntegrityError: If this would leave two accepted answers on a
                question (unique partial index)
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer.

        Returns:
            True if an answer was deleted
        """
        pass
