"""Question routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from stackit.application.usecase.base import CamelModel
from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionDetailResponse,
    QuestionResponse,
)
from stackit.domain.error import (
    InvalidArgumentError,
    NotAuthenticatedError,
    NotFoundError,
)
from stackit.domain.service import JWTService

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(CamelModel):
    """API request for asking a question."""

    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None


@router.post(
    "", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Ask a new question.

    Requires authentication.

    Args:
        request: Title, description and tags
        create_question_use_case: Create question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created question

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                author_id=user_id,
                title=request.title,
                description=request.description,
                tags=request.tags,
            )
        )
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except InvalidArgumentError as e:
        logfire.warn("Question creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    page: int | None = None,
    limit: int | None = None,
    tag: str | None = None,
    search: str | None = None,
) -> ListQuestionsResponse:
    """List questions, newest first.

    Args:
        list_questions_use_case: List questions use case from DI
        page: 1-based page number (default 1)
        limit: Page size (default 20, at most 100)
        tag: Only questions with a tag containing this text
        search: Only questions whose title or description contains this text

    Returns:
        One page of questions and pagination metadata
    """
    return await list_questions_use_case.execute(
        ListQuestionsRequest(page=page, limit=limit, tag=tag, search=search)
    )


@router.get("/{question_id}", response_model=QuestionDetailResponse)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionDetailResponse:
    """Get a question with its answers and vote summaries.

    Authentication is optional; when present the caller's own votes are
    included.

    Raises:
        HTTPException: If the question ID is malformed or not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(question_id=question_id, user_id=user_id)
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
