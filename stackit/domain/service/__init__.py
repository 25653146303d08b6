"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .moderation_service import ModerationOverview, ModerationService
from .question_service import QuestionService
from .vote_service import CastVoteResult, VoteService, VoteSummary

__all__ = [
    "AnswerService",
    "CastVoteResult",
    "JWTService",
    "ModerationOverview",
    "ModerationService",
    "QuestionService",
    "Service",
    "VoteService",
    "VoteSummary",
]
