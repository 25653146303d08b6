"""Unit tests for VoteService."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import uuid4

import pytest

from stackit.domain.error import ConflictError, NotFoundError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import UserId, VoteAction, VoteTarget, VoteType
from stackit.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _seed_question(env) -> VoteTarget:
    question_repo = await env.get(QuestionRepository)
    question = await question_repo.save(make_question())
    return VoteTarget(question_id=question.id)


async def _seed_answer(env) -> VoteTarget:
    question_repo = await env.get(QuestionRepository)
    answer_repo = await env.get(AnswerRepository)
    question = await question_repo.save(make_question())
    answer = await answer_repo.save(make_answer(question.id))
    return VoteTarget(answer_id=answer.id)


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_first_vote_is_created(self, unit_env):
        """A first vote creates a row and counts towards the score."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_question(unit_env)
        user_id = UserId(uuid4())

        result = await vote_service.cast_vote(user_id, target, VoteType.UP)

        assert result.action == VoteAction.CREATED
        assert result.vote_type == VoteType.UP
        assert result.user_vote == VoteType.UP
        assert result.tally.score == 1
        saved = await vote_repo.find_by_user_and_target(user_id, target)
        assert saved is not None
        assert saved.vote_type == VoteType.UP

    @pytest.mark.asyncio
    async def test_repeating_same_polarity_removes_vote(self, unit_env):
        """UP then UP leaves no vote and the score unaffected by the user."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_answer(unit_env)
        user_id = UserId(uuid4())

        await vote_service.cast_vote(user_id, target, VoteType.UP)
        result = await vote_service.cast_vote(user_id, target, VoteType.UP)

        assert result.action == VoteAction.REMOVED
        assert result.vote_type == VoteType.UP
        assert result.user_vote is None
        assert result.tally.score == 0
        assert await vote_repo.find_by_user_and_target(user_id, target) is None

    @pytest.mark.asyncio
    async def test_opposite_polarity_flips_in_place(self, unit_env):
        """UP then DOWN keeps one row and swings the score by -2."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_question(unit_env)
        user_id = UserId(uuid4())

        up = await vote_service.cast_vote(user_id, target, VoteType.UP)
        original = await vote_repo.find_by_user_and_target(user_id, target)
        down = await vote_service.cast_vote(user_id, target, VoteType.DOWN)
        flipped = await vote_repo.find_by_user_and_target(user_id, target)

        assert down.action == VoteAction.UPDATED
        assert down.user_vote == VoteType.DOWN
        assert down.tally.score - up.tally.score == -2
        assert down.tally.upvotes == 0
        assert down.tally.downvotes == 1
        assert flipped is not None
        assert flipped.id == original.id

    @pytest.mark.asyncio
    async def test_at_most_one_vote_after_any_sequence(self, unit_env):
        """However a user votes, at most one row exists for the target."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_answer(unit_env)
        user_id = UserId(uuid4())

        sequence = [
            VoteType.UP,
            VoteType.DOWN,
            VoteType.DOWN,
            VoteType.UP,
            VoteType.UP,
            VoteType.DOWN,
        ]
        for vote_type in sequence:
            await vote_service.cast_vote(user_id, target, vote_type)
            counts = await vote_repo.count_by_type(target)
            assert sum(counts.values()) <= 1

        # Last call created a DOWN vote after UP/UP toggled off
        remaining = await vote_repo.find_by_user_and_target(user_id, target)
        assert remaining is not None
        assert remaining.vote_type == VoteType.DOWN

    @pytest.mark.asyncio
    async def test_concurrent_votes_by_one_user_leave_one_row(self, unit_env):
        """Concurrent casts by the same user serialize on the target."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_question(unit_env)
        user_id = UserId(uuid4())

        results = await asyncio.gather(
            vote_service.cast_vote(user_id, target, VoteType.UP),
            vote_service.cast_vote(user_id, target, VoteType.DOWN),
            vote_service.cast_vote(user_id, target, VoteType.UP),
        )

        assert [r.action for r in results] == [
            VoteAction.CREATED,
            VoteAction.UPDATED,
            VoteAction.UPDATED,
        ]
        counts = await vote_repo.count_by_type(target)
        assert counts == {VoteType.UP: 1}

    @pytest.mark.asyncio
    async def test_voting_scenario_on_answer(self, unit_env):
        """C upvotes, D downvotes, D withdraws by downvoting again."""
        vote_service = await unit_env.get(VoteService)
        target = await _seed_answer(unit_env)
        user_c = UserId(uuid4())
        user_d = UserId(uuid4())

        r1 = await vote_service.cast_vote(user_c, target, VoteType.UP)
        assert r1.tally.score == 1

        r2 = await vote_service.cast_vote(user_d, target, VoteType.DOWN)
        assert r2.tally.score == 0

        r3 = await vote_service.cast_vote(user_d, target, VoteType.DOWN)
        assert r3.action == VoteAction.REMOVED
        assert r3.tally.score == 1

        # C repeating the upvote withdraws it as well
        r4 = await vote_service.cast_vote(user_c, target, VoteType.UP)
        assert r4.action == VoteAction.REMOVED
        assert r4.tally.score == 0

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        target = VoteTarget(question_id=uuid4())

        with pytest.raises(NotFoundError, match="Question not found"):
            await vote_service.cast_vote(UserId(uuid4()), target, VoteType.UP)

    @pytest.mark.asyncio
    async def test_missing_answer_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        target = VoteTarget(answer_id=uuid4())

        with pytest.raises(NotFoundError, match="Answer not found"):
            await vote_service.cast_vote(UserId(uuid4()), target, VoteType.DOWN)

    @pytest.mark.asyncio
    async def test_store_duplicate_becomes_conflict(self, unit_env, monkeypatch):
        """A uniqueness violation from the store surfaces as ConflictError."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_question(unit_env)
        user_id = UserId(uuid4())
        await vote_service.cast_vote(user_id, target, VoteType.UP)

        # Simulate a writer that slipped past the lock: the read sees no vote
        async def _no_vote(*args, **kwargs):
            return None

        monkeypatch.setattr(vote_repo, "find_by_user_and_target", _no_vote)

        with pytest.raises(ConflictError):
            await vote_service.cast_vote(user_id, target, VoteType.UP)


class TestVoteSummary:
    """Tests for get_vote_summary and get_answer_summaries."""

    @pytest.mark.asyncio
    async def test_summary_without_votes_is_zero(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        target = await _seed_question(unit_env)

        summary = await vote_service.get_vote_summary(target, UserId(uuid4()))

        assert summary.tally.score == 0
        assert summary.tally.upvotes == 0
        assert summary.tally.downvotes == 0
        assert summary.user_vote is None

    @pytest.mark.asyncio
    async def test_summary_reports_caller_vote(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        target = await _seed_question(unit_env)
        voter = UserId(uuid4())
        other = UserId(uuid4())
        await vote_service.cast_vote(voter, target, VoteType.DOWN)
        await vote_service.cast_vote(other, target, VoteType.UP)
        await vote_service.cast_vote(UserId(uuid4()), target, VoteType.UP)

        mine = await vote_service.get_vote_summary(target, voter)
        anonymous = await vote_service.get_vote_summary(target)

        assert mine.tally.score == 1
        assert mine.tally.upvotes == 2
        assert mine.tally.downvotes == 1
        assert mine.user_vote == VoteType.DOWN
        assert anonymous.user_vote is None

    @pytest.mark.asyncio
    async def test_answer_summaries_cover_every_answer(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        voted = await _seed_answer(unit_env)
        unvoted = await _seed_answer(unit_env)
        voter = UserId(uuid4())
        await vote_service.cast_vote(voter, voted, VoteType.UP)

        summaries = await vote_service.get_answer_summaries(
            [voted.answer_id, unvoted.answer_id], voter
        )

        assert summaries[voted.answer_id].tally.score == 1
        assert summaries[voted.answer_id].user_vote == VoteType.UP
        assert summaries[unvoted.answer_id].tally.score == 0
        assert summaries[unvoted.answer_id].user_vote is None


class UnlockedVoteRepository(InMemoryVoteRepository):
    """Vote repository whose lock does nothing."""

    @asynccontextmanager
    async def lock(self, user_id: UserId, target: VoteTarget) -> AsyncIterator[None]:
        yield


class TestVoteLock:
    """The vote lock is what keeps concurrent casts consistent."""

    @pytest.mark.asyncio
    async def test_concurrent_votes_race_without_lock(self, unit_env):
        """Without the lock every cast reads "no vote" and all but one collide."""
        vote_service = VoteService(
            vote_repository=UnlockedVoteRepository(),
            question_service=await unit_env.get(QuestionService),
            answer_service=await unit_env.get(AnswerService),
        )
        target = await _seed_question(unit_env)
        user_id = UserId(uuid4())

        results = await asyncio.gather(
            vote_service.cast_vote(user_id, target, VoteType.UP),
            vote_service.cast_vote(user_id, target, VoteType.DOWN),
            vote_service.cast_vote(user_id, target, VoteType.UP),
            return_exceptions=True,
        )

        assert results[0].action == VoteAction.CREATED
        assert all(isinstance(r, ConflictError) for r in results[1:])
