"""Get vote summary use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase, CamelModel, parse_id
from stackit.domain.service import VoteService
from stackit.domain.value import UserId, VoteTarget, VoteType


class GetVoteSummaryRequest(BaseModel):
    """Get vote summary request."""

    question_id: Optional[str] = None
    answer_id: Optional[str] = None
    user_id: Optional[str] = None  # Set when the caller is authenticated


class VoteSummaryResponse(CamelModel):
    """Vote summary response."""

    score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteType]


class GetVoteSummaryUseCase(BaseUseCase):
    """Use case for reading the vote tally of a question or an answer."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteSummaryRequest) -> VoteSummaryResponse:
        """Execute get vote summary flow.

        Raises:
            InvalidArgumentError: If both or neither target ids are given
        """
        target = VoteTarget.from_ids(
            question_id=parse_id(request.question_id, "questionId"),
            answer_id=parse_id(request.answer_id, "answerId"),
        )
        caller_id = UserId(UUID(request.user_id)) if request.user_id else None

        summary = await self.vote_service.get_vote_summary(target, caller_id)

        return VoteSummaryResponse(
            score=summary.tally.score,
            upvotes=summary.tally.upvotes,
            downvotes=summary.tally.downvotes,
            user_vote=summary.user_vote,
        )
