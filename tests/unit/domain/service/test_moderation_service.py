"""Unit tests for ModerationService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from stackit.domain.error import AdminRequiredError, NotAuthorizedError, NotFoundError
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
    VoteRepository,
)
from stackit.domain.service import AnswerService, ModerationService, VoteService
from stackit.domain.value import UserId, UserRole, VoteTarget, VoteType
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_thread(env):
    """A question with two answers, votes on all three and one accepted."""
    question_repo = await env.get(QuestionRepository)
    answer_repo = await env.get(AnswerRepository)
    vote_service = await env.get(VoteService)
    answer_service = await env.get(AnswerService)
    question = await question_repo.save(make_question())
    answers = [await answer_repo.save(make_answer(question.id)) for _ in range(2)]
    voter = UserId(uuid4())

    question_target = VoteTarget(question_id=question.id)
    await vote_service.cast_vote(voter, question_target, VoteType.UP)
    for answer in answers:
        await vote_service.cast_vote(
            voter, VoteTarget(answer_id=answer.id), VoteType.DOWN
        )
    await answer_service.toggle_accepted(question.id, answers[0].id)
    return question, answers


class TestRequireAdmin:
    @pytest.mark.asyncio
    async def test_admin_passes(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        users = await unit_env.get(UserRepository)
        admin = await users.save(make_user(role=UserRole.ADMIN))

        assert (await moderation.require_admin(admin.id)).id == admin.id

    @pytest.mark.asyncio
    async def test_plain_and_unknown_users_are_refused(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        users = await unit_env.get(UserRepository)
        member = await users.save(make_user())

        with pytest.raises(AdminRequiredError):
            await moderation.require_admin(member.id)
        # Route layer maps the parent class to 403
        with pytest.raises(NotAuthorizedError):
            await moderation.require_admin(UserId(uuid4()))


class TestDeleteContent:
    @pytest.mark.asyncio
    async def test_delete_question_cascades(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_repo = await unit_env.get(VoteRepository)
        question, answers = await _seed_thread(unit_env)

        await moderation.delete_question(question.id)

        assert await question_repo.find_by_id(question.id) is None
        assert await answer_repo.find_by_question(question.id) == []
        assert await answer_repo.find_accepted(question.id) is None
        for target in [VoteTarget(question_id=question.id)] + [
            VoteTarget(answer_id=a.id) for a in answers
        ]:
            assert await vote_repo.count_by_type(target) == {}

    @pytest.mark.asyncio
    async def test_delete_accepted_answer_clears_acceptance(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_repo = await unit_env.get(VoteRepository)
        vote_service = await unit_env.get(VoteService)
        question, (accepted, other) = await _seed_thread(unit_env)

        await moderation.delete_answer(accepted.id)

        assert await answer_repo.find_by_id(accepted.id) is None
        assert await answer_repo.find_accepted(question.id) is None
        assert await vote_repo.count_by_type(VoteTarget(answer_id=accepted.id)) == {}
        # Votes on the surviving answer and the question are untouched
        remaining = await vote_service.get_answer_summaries([other.id])
        assert remaining[other.id].tally.downvotes == 1
        question_tally = await vote_service.get_tally(
            VoteTarget(question_id=question.id)
        )
        assert question_tally.upvotes == 1

    @pytest.mark.asyncio
    async def test_missing_content_raises_not_found(self, unit_env):
        moderation = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError, match="Question"):
            await moderation.delete_question(uuid4())
        with pytest.raises(NotFoundError, match="Answer"):
            await moderation.delete_answer(uuid4())


class TestRemoveUser:
    @pytest.mark.asyncio
    async def test_removes_content_votes_and_account(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        users = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_service = await unit_env.get(VoteService)
        spammer = await users.save(make_user())
        other_question = await question_repo.save(make_question())
        own_question = await question_repo.save(make_question(author_id=spammer.id))
        await answer_repo.save(make_answer(own_question.id, author_id=spammer.id))
        await answer_repo.save(make_answer(other_question.id, author_id=spammer.id))
        kept = await answer_repo.save(make_answer(other_question.id))
        target = VoteTarget(question_id=other_question.id)
        await vote_service.cast_vote(spammer.id, target, VoteType.DOWN)

        await moderation.remove_user(spammer.id)

        assert await users.find_by_id(spammer.id) is None
        assert await question_repo.find_by_id(own_question.id) is None
        remaining = await answer_repo.find_by_question(other_question.id)
        assert [a.id for a in remaining] == [kept.id]
        assert (await vote_service.get_tally(target)).score == 0

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        moderation = await unit_env.get(ModerationService)

        with pytest.raises(NotFoundError, match="User"):
            await moderation.remove_user(UserId(uuid4()))


class TestRolesAndOverview:
    @pytest.mark.asyncio
    async def test_set_role(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        users = await unit_env.get(UserRepository)
        member = await users.save(make_user())

        promoted = await moderation.set_role(member.id, UserRole.ADMIN)

        assert promoted.is_admin
        assert (await users.find_by_id(member.id)).role is UserRole.ADMIN
        with pytest.raises(NotFoundError):
            await moderation.set_role(UserId(uuid4()), UserRole.USER)

    @pytest.mark.asyncio
    async def test_overview_counts_recent_activity(self, unit_env):
        moderation = await unit_env.get(ModerationService)
        users = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        await users.save(make_user(role=UserRole.ADMIN))
        await users.save(make_user())
        fresh = await question_repo.save(make_question())
        await question_repo.save(
            make_question(created_at=datetime.now() - timedelta(days=3))
        )
        await answer_repo.save(make_answer(fresh.id))
        await answer_repo.save(make_answer(fresh.id, age=timedelta(days=2)))

        overview = await moderation.get_overview()

        assert overview.total_users == 2
        assert overview.total_admins == 1
        assert overview.total_questions == 2
        assert overview.questions_today == 1
        assert overview.total_answers == 2
        assert overview.answers_today == 1
