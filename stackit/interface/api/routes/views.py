"""View tracking routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from stackit.application.usecase.base import CamelModel
from stackit.application.usecase.question import (
    TrackViewRequest,
    TrackViewResponse,
    TrackViewUseCase,
)
from stackit.domain.error import InvalidArgumentError, NotFoundError

router = APIRouter(prefix="/views", tags=["views"], route_class=DishkaRoute)


class TrackViewAPIRequest(CamelModel):
    question_id: str | None = None


@router.post("", response_model=TrackViewResponse)
async def track_view(
    request: TrackViewAPIRequest,
    track_view_use_case: FromDishka[TrackViewUseCase],
) -> TrackViewResponse:
    """Count one view of a question. No authentication required."""
    try:
        return await track_view_use_case.execute(
            TrackViewRequest(question_id=request.question_id)
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
