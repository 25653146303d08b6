"""Unit tests for GetQuestionUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from stackit.application.usecase.question import (
    GetQuestionRequest,
    GetQuestionUseCase,
)
from stackit.domain.error import InvalidArgumentError, NotFoundError
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import UserId, VoteTarget, VoteType
from tests.conftest import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _use_case(env) -> GetQuestionUseCase:
    return GetQuestionUseCase(
        question_service=await env.get(QuestionService),
        answer_service=await env.get(AnswerService),
        vote_service=await env.get(VoteService),
    )


class TestGetQuestionUseCase:
    @pytest.mark.asyncio
    async def test_answers_ordered_accepted_then_score_then_oldest(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_service = await unit_env.get(VoteService)
        question = await question_repo.save(make_question())

        oldest = await answer_repo.save(
            make_answer(question.id, age=timedelta(hours=3))
        )
        older = await answer_repo.save(make_answer(question.id, age=timedelta(hours=2)))
        popular = await answer_repo.save(
            make_answer(question.id, age=timedelta(hours=1))
        )
        accepted = await answer_repo.save(make_answer(question.id, is_accepted=True))

        voter = UserId(uuid4())
        await vote_service.cast_vote(
            voter, VoteTarget(answer_id=popular.id), VoteType.UP
        )
        await vote_service.cast_vote(
            voter, VoteTarget(question_id=question.id), VoteType.DOWN
        )

        response = await (await _use_case(unit_env)).execute(
            GetQuestionRequest(question_id=str(question.id), user_id=str(voter))
        )

        assert [a.id for a in response.answers] == [
            str(accepted.id),
            str(popular.id),
            str(oldest.id),
            str(older.id),
        ]
        assert response.answer_count == 4
        assert response.score == -1
        assert response.user_vote == VoteType.DOWN
        assert response.answers[1].score == 1
        assert response.answers[1].user_vote == VoteType.UP
        assert response.answers[2].user_vote is None

    @pytest.mark.asyncio
    async def test_anonymous_caller_has_no_votes(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(tags=["python", "lists"]))

        response = await (await _use_case(unit_env)).execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        assert response.tags == ["python", "lists"]
        assert response.user_vote is None
        assert response.answers == []

    @pytest.mark.asyncio
    async def test_missing_question(self, unit_env):
        with pytest.raises(NotFoundError):
            await (await _use_case(unit_env)).execute(
                GetQuestionRequest(question_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_id(self, unit_env):
        with pytest.raises(InvalidArgumentError):
            await (await _use_case(unit_env)).execute(
                GetQuestionRequest(question_id="abc")
            )
