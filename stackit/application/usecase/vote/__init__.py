"""Vote use cases."""

from .cast_vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    VoteResultDetail,
)
from .get_vote_summary import (
    GetVoteSummaryRequest,
    GetVoteSummaryUseCase,
    VoteSummaryResponse,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "VoteResultDetail",
    "GetVoteSummaryRequest",
    "GetVoteSummaryUseCase",
    "VoteSummaryResponse",
]
