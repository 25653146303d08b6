"""PostgreSQL implementation of Question repository."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List, Optional

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from stackit.domain.model import Question
from stackit.domain.repository import QuestionRepository
from stackit.domain.value import QuestionId, UserId
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import questions_table


def _contains(value: str) -> str:
    """Build an ILIKE pattern matching value as a literal substring."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    @asynccontextmanager
    async def lock(self, question_id: QuestionId) -> AsyncIterator[Optional[Question]]:
        """Lock the question row until the transaction ends (FOR UPDATE)."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        yield row_to_question(row._asdict()) if row else None

    def _filters(
        self, tag: Optional[str], search: Optional[str]
    ) -> List[ColumnElement[bool]]:
        filters: List[ColumnElement[bool]] = []
        if tag:
            # Tag names never contain commas, so a comma-free pattern can
            # only match inside a single tag
            filters.append(
                func.array_to_string(questions_table.c.tag_names, ",").ilike(
                    _contains(tag), escape="\\"
                )
            )
        if search:
            pattern = _contains(search)
            filters.append(
                or_(
                    questions_table.c.title.ilike(pattern, escape="\\"),
                    questions_table.c.description.ilike(pattern, escape="\\"),
                )
            )
        return filters

    async def find_all(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions, newest first, with filtering and pagination."""
        stmt = (
            select(questions_table)
            .where(*self._filters(tag, search))
            .order_by(questions_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        tag: Optional[str] = None,
        search: Optional[str] = None,
        since: Optional[datetime] = None,
    ) -> int:
        """Count questions matching the given filters."""
        filters = self._filters(tag, search)
        if since is not None:
            filters.append(questions_table.c.created_at >= since)

        stmt = select(func.count()).select_from(questions_table).where(*filters)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, question: Question) -> Question:
        """Save a question (create)."""
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def increment_views(self, question_id: QuestionId) -> Optional[int]:
        """Atomically increment the view counter."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
            .returning(questions_table.c.views)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_ids_by_author(self, author_id: UserId) -> List[QuestionId]:
        """Find the IDs of all questions asked by a user."""
        stmt = select(questions_table.c.id).where(
            questions_table.c.author_id == author_id
        )
        result = await self.session.execute(stmt)
        return [QuestionId(question_id) for question_id in result.scalars().all()]

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question; its answers and votes go with it (ON DELETE CASCADE)."""
        stmt = (
            delete(questions_table)
            .where(questions_table.c.id == question_id)
            .returning(questions_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() is not None
