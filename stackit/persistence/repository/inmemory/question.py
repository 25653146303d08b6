"""In-memory question repository for testing."""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Optional

from stackit.domain.model.question import Question
from stackit.domain.repository.question import QuestionRepository
from stackit.domain.value import QuestionId, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._locks: defaultdict[QuestionId, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    @asynccontextmanager
    async def lock(self, question_id: QuestionId) -> AsyncIterator[Optional[Question]]:
        """Hold a per-question lock for the duration of the block."""
        async with self._locks[question_id]:
            yield self._questions.get(question_id)

    def _matching(self, tag: Optional[str], search: Optional[str]) -> list[Question]:
        questions = list(self._questions.values())

        if tag:
            needle = tag.lower()
            questions = [
                q for q in questions if any(needle in t.root for t in q.tag_names)
            ]

        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.description.lower()
            ]

        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions

    async def find_all(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions, newest first, with filtering and pagination."""
        return self._matching(tag, search)[offset : offset + limit]

    async def count(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        since: Optional[datetime] = None,
    ) -> int:
        """Count questions matching the given filters."""
        return sum(
            1
            for q in self._matching(tag, search)
            if since is None or q.created_at >= since
        )

    async def find_ids_by_author(self, author_id: UserId) -> list[QuestionId]:
        """Find the IDs of all questions asked by a user."""
        return [q.id for q in self._questions.values() if q.author_id == author_id]

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question

    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        """Increment the view counter."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.evolve(views=question.views + 1)
        self._questions[question_id] = updated
        return updated.views

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question."""
        return self._questions.pop(question_id, None) is not None
