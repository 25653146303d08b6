"""PostgreSQL implementation of Vote repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from stackit.domain.model import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import AnswerId, UserId, VoteId, VoteTarget, VoteType
from stackit.persistence.mappers import row_to_vote, vote_to_dict
from stackit.persistence.tables import votes_table


def _target_clause(target: VoteTarget) -> ColumnElement[bool]:
    if target.question_id is not None:
        return votes_table.c.question_id == target.question_id
    return votes_table.c.answer_id == target.answer_id


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def lock(self, user_id: UserId, target: VoteTarget) -> AsyncIterator[None]:
        """Take a transaction-scoped advisory lock keyed on (user, target).

        The lock is released by PostgreSQL when the transaction ends, not
        when the context exits.
        """
        key = f"vote:{user_id}:{target}"
        stmt = select(func.pg_advisory_xact_lock(func.hashtextextended(key, 0)))
        await self.session.execute(stmt)
        yield

    async def find_by_user_and_target(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(votes_table.c.user_id == user_id, _target_clause(target))
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Vote]:
        """Find a user's votes on multiple answers (batch query)."""
        if not answer_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.answer_id.in_(answer_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Flip the polarity of an existing vote in place."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value)
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_type(self, target: VoteTarget) -> Dict[VoteType, int]:
        """Count votes on an item grouped by polarity."""
        stmt = (
            select(votes_table.c.vote_type, func.count())
            .where(_target_clause(target))
            .group_by(votes_table.c.vote_type)
        )
        result = await self.session.execute(stmt)
        return {VoteType(vote_type): count for vote_type, count in result.fetchall()}

    async def count_by_type_for_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, Dict[VoteType, int]]:
        """Count votes grouped by polarity for many answers at once."""
        if not answer_ids:
            return {}

        stmt = (
            select(votes_table.c.answer_id, votes_table.c.vote_type, func.count())
            .where(votes_table.c.answer_id.in_(answer_ids))
            .group_by(votes_table.c.answer_id, votes_table.c.vote_type)
        )
        result = await self.session.execute(stmt)

        counts: Dict[AnswerId, Dict[VoteType, int]] = {}
        for answer_id, vote_type, count in result.fetchall():
            counts.setdefault(AnswerId(answer_id), {})[VoteType(vote_type)] = count
        return counts

    async def delete_by_target(self, target: VoteTarget) -> int:
        """Delete every vote on an item."""
        stmt = delete(votes_table).where(_target_clause(target))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every vote cast by a user."""
        stmt = delete(votes_table).where(votes_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
