"""Integration tests for the vote and acceptance locks.

Each caller gets its own session and transaction, as two concurrent
requests would. Seed data is committed so both sessions can see it.
"""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import UserId, VoteAction, VoteTarget, VoteType
from stackit.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
    PostgresVoteRepository,
)
from stackit.persistence.tables import users_table
from stackit.persistence.unit_of_work import SqlAlchemyUnitOfWork
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


async def _user(session: AsyncSession) -> UserId:
    user_id = UserId(uuid4())
    await session.execute(
        insert(users_table).values(id=user_id, handle=f"user-{str(user_id)[:8]}")
    )
    return user_id


def _services(session: AsyncSession) -> tuple[VoteService, AnswerService]:
    question_repo = PostgresQuestionRepository(session)
    question_service = QuestionService(question_repository=question_repo)
    answer_service = AnswerService(
        answer_repository=PostgresAnswerRepository(session),
        question_repository=question_repo,
    )
    vote_service = VoteService(
        vote_repository=PostgresVoteRepository(session),
        question_service=question_service,
        answer_service=answer_service,
    )
    return vote_service, answer_service


async def _seed(session_factory: async_sessionmaker[AsyncSession], answers: int):
    async with session_factory() as session:
        async with SqlAlchemyUnitOfWork(session):
            author = await _user(session)
            question = await PostgresQuestionRepository(session).save(
                make_question(author_id=author)
            )
            answer_repo = PostgresAnswerRepository(session)
            seeded = [
                await answer_repo.save(make_answer(question.id, author_id=author))
                for _ in range(answers)
            ]
    return author, question, seeded


class TestVoteAdvisoryLock:
    @pytest.mark.asyncio
    async def test_concurrent_repeat_votes_toggle_in_turn(self, integration_env):
        """Two sessions casting the same UP vote: one creates, one removes.

        Without pg_advisory_xact_lock both would read "no vote" and the
        second insert would fail on the unique constraint.
        """
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        _, question, _ = await _seed(session_factory, 0)
        target = VoteTarget(question_id=question.id)
        async with session_factory() as session:
            async with SqlAlchemyUnitOfWork(session):
                voter = await _user(session)

        async def cast():
            async with session_factory() as session:
                async with SqlAlchemyUnitOfWork(session):
                    vote_service, _ = _services(session)
                    return await vote_service.cast_vote(voter, target, VoteType.UP)

        results = await asyncio.gather(cast(), cast())

        assert sorted(r.action.value for r in results) == [
            VoteAction.CREATED.value,
            VoteAction.REMOVED.value,
        ]
        async with session_factory() as session:
            counts = await PostgresVoteRepository(session).count_by_type(target)
        assert counts == {}


class TestQuestionRowLock:
    @pytest.mark.asyncio
    async def test_concurrent_accepts_leave_one_accepted(self, integration_env):
        """Two sessions accepting different answers both succeed in turn.

        Without SELECT ... FOR UPDATE both would see no accepted answer and
        the later one would fail on the partial unique index.
        """
        session_factory = await integration_env.get(async_sessionmaker[AsyncSession])
        _, question, answers = await _seed(session_factory, 2)

        async def accept(answer):
            async with session_factory() as session:
                async with SqlAlchemyUnitOfWork(session):
                    _, answer_service = _services(session)
                    return await answer_service.toggle_accepted(question.id, answer.id)

        results = await asyncio.gather(*(accept(a) for a in answers))

        assert results == [True, True]
        async with session_factory() as session:
            stored = await PostgresAnswerRepository(session).find_by_question(
                question.id
            )
        assert len([a for a in stored if a.is_accepted]) == 1
