"""In-memory vote repository for testing."""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from stackit.domain.model.vote import Vote
from stackit.domain.repository.vote import VoteRepository
from stackit.domain.value import AnswerId, UserId, VoteId, VoteTarget, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Lookups yield to the event loop after reading, like a database round
    trip, so concurrent callers interleave unless they hold the lock.
    """

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._locks: defaultdict[tuple[UserId, VoteTarget], asyncio.Lock] = (
            defaultdict(asyncio.Lock)
        )

    @asynccontextmanager
    async def lock(self, user_id: UserId, target: VoteTarget) -> AsyncIterator[None]:
        """Hold a per (user, target) lock for the duration of the block."""
        async with self._locks[(user_id, target)]:
            yield

    def _on_target(self, target: VoteTarget) -> list[Vote]:
        return [v for v in self._votes if v.target == target]

    async def find_by_user_and_target(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        """Find a vote by user and target."""
        found = next(
            (v for v in self._on_target(target) if v.user_id == user_id), None
        )
        await asyncio.sleep(0)
        return found

    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> list[Vote]:
        """Find a user's votes on multiple answers (batch query)."""
        if not answer_ids:
            return []

        wanted = set(answer_ids)
        return [
            v for v in self._votes if v.user_id == user_id and v.answer_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        if any(v.user_id == vote.user_id for v in self._on_target(vote.target)):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Flip the polarity of an existing vote."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                updated = vote.evolve(vote_type=vote_type)
                self._votes[i] = updated
                return updated
        return None

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote by ID."""
        self._votes = [v for v in self._votes if v.id != vote_id]

    async def delete_by_target(self, target: VoteTarget) -> int:
        """Delete every vote on an item."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.target != target]
        return before - len(self._votes)

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every vote cast by a user."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.user_id != user_id]
        return before - len(self._votes)

    async def count_by_type(self, target: VoteTarget) -> dict[VoteType, int]:
        """Count votes on an item grouped by polarity."""
        counts: dict[VoteType, int] = {}
        for vote in self._on_target(target):
            counts[vote.vote_type] = counts.get(vote.vote_type, 0) + 1
        return counts

    async def count_by_type_for_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> dict[AnswerId, dict[VoteType, int]]:
        """Count votes grouped by polarity for many answers at once."""
        wanted = set(answer_ids)
        counts: dict[AnswerId, dict[VoteType, int]] = {}
        for vote in self._votes:
            if vote.answer_id in wanted:
                per_type = counts.setdefault(vote.answer_id, {})
                per_type[vote.vote_type] = per_type.get(vote.vote_type, 0) + 1
        return counts
