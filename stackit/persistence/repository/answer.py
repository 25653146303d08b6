"""PostgreSQL implementation of Answer repository."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(answers_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_accepted(self, question_id: QuestionId) -> Optional[Answer]:
        """Find the accepted answer of a question, if any."""
        stmt = select(answers_table).where(
            and_(
                answers_table.c.question_id == question_id,
                answers_table.c.is_accepted.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create)."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set or clear the accepted flag of one answer."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=is_accepted)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count answers for many questions at once."""
        if not question_ids:
            return {}

        stmt = (
            select(answers_table.c.question_id, func.count())
            .where(answers_table.c.question_id.in_(question_ids))
            .group_by(answers_table.c.question_id)
        )
        result = await self.session.execute(stmt)
        return {
            QuestionId(question_id): count
            for question_id, count in result.fetchall()
        }

    async def count(self, since: Optional[datetime] = None) -> int:
        """Count all answers, optionally only those created since a time."""
        stmt = select(func.count()).select_from(answers_table)
        if since is not None:
            stmt = stmt.where(answers_table.c.created_at >= since)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_recent(self, limit: int = 20) -> List[Answer]:
        """Find answers across all questions, newest first."""
        stmt = (
            select(answers_table)
            .order_by(answers_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def find_ids_by_author(self, author_id: UserId) -> List[AnswerId]:
        """Find the IDs of all answers written by a user."""
        stmt = select(answers_table.c.id).where(answers_table.c.author_id == author_id)
        result = await self.session.execute(stmt)
        return [AnswerId(answer_id) for answer_id in result.scalars().all()]

    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer; its votes go with it (ON DELETE CASCADE)."""
        stmt = (
            delete(answers_table)
            .where(answers_table.c.id == answer_id)
            .returning(answers_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() is not None
