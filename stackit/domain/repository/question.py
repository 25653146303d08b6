"""Question repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import List, Optional

from stackit.domain.model.question import Question
from stackit.domain.value import QuestionId, UserId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    def lock(
        self, question_id: QuestionId
    ) -> AbstractAsyncContextManager[Optional[Question]]:
        """Lock a question for the rest of the current transaction.

        Other callers locking the same question wait until the holder's
        transaction ends. Used to serialize changes to the question's
        accepted answer.

        Args:
            question_id: The question to lock

        Returns:
            Async context manager yielding the question, or None if it
            does not exist
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions, newest first, with filtering and pagination.

        Args:
            tag: Case-insensitive substring a tag name must contain
            search: Case-insensitive substring of title or description
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        since: Optional[datetime] = None,
    ) -> int:
        """Count questions matching the given filters.

        Args:
            tag: Case-insensitive substring a tag name must contain
            search: Case-insensitive substring of title or description
            since: Only count questions created at or after this time
        """
        pass

    @abstractmethod
    async def find_ids_by_author(self, author_id: UserId) -> List[QuestionId]:
        """Find the IDs of all questions asked by a user."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        """Atomically increment the view counter.

        Args:
            question_id: The question's ID

        Returns:
            The new view count, or None if the question does not exist
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question.

        Returns:
            True if a question was deleted
        """
        pass
