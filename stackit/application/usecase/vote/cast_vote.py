"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase, CamelModel, parse_id
from stackit.domain.error import NotAuthenticatedError
from stackit.domain.repository import UnitOfWork
from stackit.domain.service import VoteService
from stackit.domain.value import UserId, VoteAction, VoteTarget, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    user_id: Optional[str]  # User ID from authenticated user
    vote_type: Optional[str]  # "UP" or "DOWN"
    question_id: Optional[str] = None  # UUID string
    answer_id: Optional[str] = None  # UUID string


class VoteResultDetail(CamelModel):
    """What the vote did."""

    action: VoteAction
    type: VoteType


class CastVoteResponse(CamelModel):
    """Cast vote response."""

    success: bool
    result: VoteResultDetail
    score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteType]


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a question or an answer.

    Repeating a vote withdraws it; voting the other way flips it.
    """

    def __init__(self, vote_service: VoteService, unit_of_work: UnitOfWork) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            unit_of_work: Transaction the vote is committed in
        """
        self.vote_service = vote_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Action taken and the recomputed tally

        Raises:
            NotAuthenticatedError: If no user ID is given
            InvalidArgumentError: If the vote type or target is invalid
            NotFoundError: If the target does not exist
        """
        if not request.user_id:
            raise NotAuthenticatedError("vote")

        user_id = UserId(UUID(request.user_id))
        vote_type = VoteType.parse(request.vote_type)
        target = VoteTarget.from_ids(
            question_id=parse_id(request.question_id, "questionId"),
            answer_id=parse_id(request.answer_id, "answerId"),
        )

        # Committed before responding; the vote lock is released here
        async with self.unit_of_work:
            result = await self.vote_service.cast_vote(user_id, target, vote_type)

        return CastVoteResponse(
            success=True,
            result=VoteResultDetail(action=result.action, type=result.vote_type),
            score=result.tally.score,
            upvotes=result.tally.upvotes,
            downvotes=result.tally.downvotes,
            user_vote=result.user_vote,
        )
