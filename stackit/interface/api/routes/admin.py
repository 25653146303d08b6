"""Admin moderation routes.

Every route requires an authenticated caller whose stored role is ADMIN.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from stackit.application.usecase.admin import (
    AdminRequest,
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetOverviewUseCase,
    GetRecentAnswersUseCase,
    GetRecentQuestionsUseCase,
    ListUsersUseCase,
    ModerateRequest,
    ModerateUseCase,
    ModerationResponse,
    OverviewResponse,
    RecentAnswer,
    RecentQuestion,
    UpdateUserRoleRequest,
    UpdateUserRoleResponse,
    UpdateUserRoleUseCase,
    UserSummary,
)
from stackit.application.usecase.base import CamelModel
from stackit.domain.error import (
    InvalidArgumentError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)
from stackit.domain.service import JWTService

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class ModerateAPIRequest(CamelModel):
    """API request for a moderation action."""

    action: str | None = None
    user_id: str | None = None
    question_id: str | None = None
    answer_id: str | None = None


class UpdateUserRoleAPIRequest(CamelModel):
    """API request for changing a user's role."""

    user_id: str | None = None
    role: str | None = None


def _http_error(error: Exception, action: str) -> HTTPException:
    """Map a use case error to the HTTP error the admin routes return."""
    if isinstance(error, NotAuthenticatedError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(error),
        )
    if isinstance(error, InvalidArgumentError):
        logfire.warn(f"Admin {action} validation error", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
        )
    logfire.error(f"Unexpected error during admin {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


@router.delete("/questions/{question_id}", response_model=ModerationResponse)
async def delete_question(
    question_id: str,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerationResponse:
    """Delete a question with its answers and every vote on them.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not an admin, 404 if
            the question does not exist
    """
    admin_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await delete_question_use_case.execute(
            DeleteQuestionRequest(admin_id=admin_id, question_id=question_id)
        )
    except Exception as e:
        raise _http_error(e, "question delete")


@router.delete("/answers/{answer_id}", response_model=ModerationResponse)
async def delete_answer(
    answer_id: str,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerationResponse:
    """Delete an answer and every vote on it.

    An accepted answer takes the question's acceptance with it.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not an admin, 404 if
            the answer does not exist
    """
    admin_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await delete_answer_use_case.execute(
            DeleteAnswerRequest(admin_id=admin_id, answer_id=answer_id)
        )
    except Exception as e:
        raise _http_error(e, "answer delete")


@router.post("/moderate", response_model=ModerationResponse)
async def moderate(
    request: ModerateAPIRequest,
    moderate_use_case: FromDishka[ModerateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerationResponse:
    """Ban a user or hide a question or answer.

    Banning removes the user with everything they posted and every vote
    they cast. Hiding removes the content like the delete routes do.
    """
    admin_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await moderate_use_case.execute(
            ModerateRequest(
                admin_id=admin_id,
                action=request.action,
                user_id=request.user_id,
                question_id=request.question_id,
                answer_id=request.answer_id,
            )
        )
    except Exception as e:
        raise _http_error(e, "moderation")


@router.get("/overview", response_model=OverviewResponse)
async def get_overview(
    get_overview_use_case: FromDishka[GetOverviewUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> OverviewResponse:
    """Site-wide counters for the admin dashboard."""
    admin_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_overview_use_case.execute(AdminRequest(admin_id=admin_id))
    except Exception as e:
        raise _http_error(e, "overview")


@router.get("/questions/recent", response_model=list[RecentQuestion])
async def get_recent_questions(
    get_recent_questions_use_case: FromDishka[GetRecentQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> list[RecentQuestion]:
    admin_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_recent_questions_use_case.execute(
            AdminRequest(admin_id=admin_id)
        )
    except Exception as e:
        raise _http_error(e, "recent questions")


@router.get("/answers/recent", response_model=list[RecentAnswer])
async def get_recent_answers(
    get_recent_answers_use_case: FromDishka[GetRecentAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> list[RecentAnswer]:
    admin_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_recent_answers_use_case.execute(
            AdminRequest(admin_id=admin_id)
        )
    except Exception as e:
        raise _http_error(e, "recent answers")


@router.get("/users", response_model=list[UserSummary])
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> list[UserSummary]:
    """List the newest users with their roles."""
    admin_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await list_users_use_case.execute(AdminRequest(admin_id=admin_id))
    except Exception as e:
        raise _http_error(e, "user listing")


@router.post("/users/role", response_model=UpdateUserRoleResponse)
async def update_user_role(
    request: UpdateUserRoleAPIRequest,
    update_user_role_use_case: FromDishka[UpdateUserRoleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserRoleResponse:
    """Promote a user to ADMIN or demote them to USER."""
    admin_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await update_user_role_use_case.execute(
            UpdateUserRoleRequest(
                admin_id=admin_id, user_id=request.user_id, role=request.role
            )
        )
    except Exception as e:
        raise _http_error(e, "role update")
