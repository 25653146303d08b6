"""Unit tests for admin use cases."""

from uuid import uuid4

import pytest

from stackit.application.usecase.admin import (
    AdminRequest,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    ListUsersUseCase,
    ModerateRequest,
    ModerateUseCase,
    UpdateUserRoleRequest,
    UpdateUserRoleUseCase,
)
from stackit.domain.error import (
    InvalidArgumentError,
    NotAuthenticatedError,
    NotAuthorizedError,
)
from stackit.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UnitOfWork,
    UserRepository,
)
from stackit.domain.value import UserRole
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _admin_id(env) -> str:
    users = await env.get(UserRepository)
    admin = await users.save(make_user(role=UserRole.ADMIN))
    return str(admin.id)


class TestDeleteContentUseCases:
    @pytest.mark.asyncio
    async def test_delete_question_commits(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        unit_of_work = await unit_env.get(UnitOfWork)
        use_case = await unit_env.get(DeleteQuestionUseCase)
        question = await question_repo.save(make_question())

        response = await use_case.execute(
            DeleteQuestionRequest(
                admin_id=await _admin_id(unit_env), question_id=str(question.id)
            )
        )

        assert response.message == "Question deleted successfully"
        assert await question_repo.find_by_id(question.id) is None
        assert unit_of_work.commits == 1

    @pytest.mark.asyncio
    async def test_non_admin_rolls_back(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        users = await unit_env.get(UserRepository)
        unit_of_work = await unit_env.get(UnitOfWork)
        use_case = await unit_env.get(DeleteAnswerUseCase)
        member = await users.save(make_user())
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteAnswerRequest(admin_id=str(member.id), answer_id=str(answer.id))
            )

        assert await answer_repo.find_by_id(answer.id) is not None
        assert unit_of_work.commits == 0
        assert unit_of_work.rollbacks == 1

    @pytest.mark.asyncio
    async def test_requires_caller(self, unit_env):
        use_case = await unit_env.get(DeleteQuestionUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(
                DeleteQuestionRequest(admin_id=None, question_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_requires_answer_id(self, unit_env):
        use_case = await unit_env.get(DeleteAnswerUseCase)

        with pytest.raises(InvalidArgumentError, match="required"):
            await use_case.execute(
                DeleteAnswerRequest(
                    admin_id=await _admin_id(unit_env), answer_id=None
                )
            )


class TestModerateUseCase:
    @pytest.mark.asyncio
    async def test_hide_answer(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        use_case = await unit_env.get(ModerateUseCase)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id))

        response = await use_case.execute(
            ModerateRequest(
                admin_id=await _admin_id(unit_env),
                action="hide_answer",
                answer_id=str(answer.id),
            )
        )

        assert response.message == "Answer hidden successfully"
        assert await answer_repo.find_by_id(answer.id) is None

    @pytest.mark.asyncio
    async def test_unknown_action(self, unit_env):
        use_case = await unit_env.get(ModerateUseCase)

        with pytest.raises(InvalidArgumentError, match="Invalid action"):
            await use_case.execute(
                ModerateRequest(admin_id=await _admin_id(unit_env), action="purge")
            )


class TestUserUseCases:
    @pytest.mark.asyncio
    async def test_update_role(self, unit_env):
        users = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateUserRoleUseCase)
        member = await users.save(make_user())

        response = await use_case.execute(
            UpdateUserRoleRequest(
                admin_id=await _admin_id(unit_env),
                user_id=str(member.id),
                role="ADMIN",
            )
        )

        assert response.message == "User role updated to ADMIN successfully"
        assert response.user.role is UserRole.ADMIN

    @pytest.mark.asyncio
    async def test_update_role_requires_both_fields(self, unit_env):
        use_case = await unit_env.get(UpdateUserRoleUseCase)

        with pytest.raises(InvalidArgumentError, match="required"):
            await use_case.execute(
                UpdateUserRoleRequest(
                    admin_id=await _admin_id(unit_env),
                    user_id=str(uuid4()),
                    role=None,
                )
            )

    @pytest.mark.asyncio
    async def test_list_users(self, unit_env):
        users = await unit_env.get(UserRepository)
        use_case = await unit_env.get(ListUsersUseCase)
        admin_id = await _admin_id(unit_env)
        member = await users.save(make_user())

        listed = await use_case.execute(AdminRequest(admin_id=admin_id))

        assert {u.id: u.role for u in listed} == {
            admin_id: UserRole.ADMIN,
            str(member.id): UserRole.USER,
        }
