"""Admin moderation use cases."""

from .base import ModerationResponse, UserSummary
from .delete_content import (
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
)
from .moderate import ModerateRequest, ModerateUseCase, ModerationAction
from .overview import (
    AdminRequest,
    GetOverviewUseCase,
    GetRecentAnswersUseCase,
    GetRecentQuestionsUseCase,
    OverviewResponse,
    RecentAnswer,
    RecentQuestion,
)
from .users import (
    ListUsersUseCase,
    UpdateUserRoleRequest,
    UpdateUserRoleResponse,
    UpdateUserRoleUseCase,
)

__all__ = [
    "AdminRequest",
    "DeleteAnswerRequest",
    "DeleteAnswerUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetOverviewUseCase",
    "GetRecentAnswersUseCase",
    "GetRecentQuestionsUseCase",
    "ListUsersUseCase",
    "ModerateRequest",
    "ModerateUseCase",
    "ModerationAction",
    "ModerationResponse",
    "OverviewResponse",
    "RecentAnswer",
    "RecentQuestion",
    "UpdateUserRoleRequest",
    "UpdateUserRoleResponse",
    "UpdateUserRoleUseCase",
]
