"""Answer routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    AnswerResponse,
    CreateAnswerRequest,
    CreateAnswerUseCase,
)
from stackit.application.usecase.base import CamelModel
from stackit.domain.error import (
    InvalidArgumentError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)
from stackit.domain.service import JWTService

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(CamelModel):
    """API request for answering a question."""

    content: str | None = None
    question_id: str | None = None


class AcceptAnswerAPIRequest(CamelModel):
    """API request for accepting an answer."""

    answer_id: str | None = None
    question_id: str | None = None


@router.post("", response_model=AnswerResponse, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerResponse:
    """Answer a question.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, input is invalid, or the
            question does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                author_id=user_id,
                question_id=request.question_id,
                content=request.content,
            )
        )
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except InvalidArgumentError as e:
        logfire.warn("Answer creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post("/accept", response_model=AcceptAnswerResponse)
async def accept_answer(
    request: AcceptAnswerAPIRequest,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptAnswerResponse:
    """Accept an answer, or unaccept it if it is already accepted.

    Only the author of the question may do this. Accepting an answer
    unaccepts any other accepted answer of the same question.

    Args:
        request: Answer and question IDs
        accept_answer_use_case: Accept answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The answer's new acceptance state

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the question
            author, 404 if the question or answer is missing, 400 if the
            answer belongs to another question or ids are missing
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await accept_answer_use_case.execute(
            AcceptAnswerRequest(
                user_id=user_id,
                answer_id=request.answer_id,
                question_id=request.question_id,
            )
        )
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotAuthorizedError as e:
        logfire.warn(
            "Accept attempted by non-author",
            user_id=e.user_id,
            question_id=e.resource_id,
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the question author can accept answers",
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error accepting answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
