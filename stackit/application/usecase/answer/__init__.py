"""Answer use cases."""

from .accept_answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
)
from .create_answer import AnswerResponse, CreateAnswerRequest, CreateAnswerUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerResponse",
    "AcceptAnswerUseCase",
    "AnswerResponse",
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
]
