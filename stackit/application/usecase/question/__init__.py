"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    QuestionResponse,
)
from .get_question import (
    AnswerDetail,
    GetQuestionRequest,
    GetQuestionUseCase,
    QuestionDetailResponse,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    Pagination,
)
from .track_view import TrackViewRequest, TrackViewResponse, TrackViewUseCase

__all__ = [
    "AnswerDetail",
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "Pagination",
    "QuestionDetailResponse",
    "QuestionResponse",
    "TrackViewRequest",
    "TrackViewResponse",
    "TrackViewUseCase",
]
