"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from stackit.application.usecase.base import CamelModel
from stackit.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryUseCase,
    VoteSummaryResponse,
)
from stackit.domain.error import (
    InvalidArgumentError,
    NotAuthenticatedError,
    NotFoundError,
)
from stackit.domain.service import JWTService

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(CamelModel):
    """API request for casting a vote.

    Fields are optional here so that missing values are reported as 400
    by the use case rather than 422 by the framework.
    """

    type: str | None = None
    question_id: str | None = None
    answer_id: str | None = None


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question or an answer.

    Voting the same way twice removes the vote; voting the other way
    flips it. Requires authentication.

    Args:
        request: Vote type and exactly one of questionId / answerId
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Action taken and the item's new tally

    Raises:
        HTTPException: If not authenticated, input is invalid, or the
            target does not exist
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                user_id=user_id,
                vote_type=request.type,
                question_id=request.question_id,
                answer_id=request.answer_id,
            )
        )
    except NotAuthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
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
    except Exception as e:
        logfire.error("Unexpected error casting vote", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("", response_model=VoteSummaryResponse)
async def get_vote_summary(
    get_vote_summary_use_case: FromDishka[GetVoteSummaryUseCase],
    jwt_service: FromDishka[JWTService],
    question_id: str | None = Query(default=None, alias="questionId"),
    answer_id: str | None = Query(default=None, alias="answerId"),
    auth_token: str | None = Cookie(default=None),
) -> VoteSummaryResponse:
    """Get the tally of a question or an answer.

    Authentication is optional; when present the caller's own vote is
    included.

    Raises:
        HTTPException: If neither or both ids are given, or an id is malformed
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        return await get_vote_summary_use_case.execute(
            GetVoteSummaryRequest(
                question_id=question_id,
                answer_id=answer_id,
                user_id=user_id,
            )
        )
    except InvalidArgumentError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error fetching votes", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
