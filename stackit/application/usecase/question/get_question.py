"""Get question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase, CamelModel, parse_id
from stackit.domain.error import InvalidArgumentError, NotFoundError
from stackit.domain.service import AnswerService, QuestionService, VoteService
from stackit.domain.value import QuestionId, UserId, VoteTarget, VoteType

from .create_question import QuestionResponse


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class AnswerDetail(CamelModel):
    """Answer with its vote summary."""

    id: str
    author_id: str
    content: str
    is_accepted: bool
    created_at: datetime
    score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteType]


class QuestionDetailResponse(QuestionResponse):
    """Question with its vote summary and answers."""

    score: int
    upvotes: int
    downvotes: int
    user_vote: Optional[VoteType]
    answer_count: int
    answers: list[AnswerDetail]


class GetQuestionUseCase(BaseUseCase):
    """Use case for retrieving a question with its answers."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> QuestionDetailResponse:
        """Execute get question flow.

        Answers are ordered accepted first, then by score (highest first),
        then oldest first.

        Raises:
            InvalidArgumentError: If the question ID is malformed
            NotFoundError: If the question does not exist
        """
        raw_question_id = parse_id(request.question_id, "questionId")
        if raw_question_id is None:
            raise InvalidArgumentError("Question ID is required")
        question_id = QuestionId(raw_question_id)
        caller_id = UserId(UUID(request.user_id)) if request.user_id else None

        with logfire.span("get_question.execute", question_id=str(question_id)):
            question = await self.question_service.get_question_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))

            summary = await self.vote_service.get_vote_summary(
                VoteTarget(question_id=question_id), caller_id
            )

            answers = await self.answer_service.get_answers_for_question(question_id)
            summaries = await self.vote_service.get_answer_summaries(
                [a.id for a in answers], caller_id
            )

            details = [
                AnswerDetail(
                    id=str(answer.id),
                    author_id=str(answer.author_id),
                    content=answer.content,
                    is_accepted=answer.is_accepted,
                    created_at=answer.created_at,
                    score=summaries[answer.id].tally.score,
                    upvotes=summaries[answer.id].tally.upvotes,
                    downvotes=summaries[answer.id].tally.downvotes,
                    user_vote=summaries[answer.id].user_vote,
                )
                for answer in answers
            ]
            details.sort(key=lambda a: (not a.is_accepted, -a.score, a.created_at))

            base = QuestionResponse.from_question(question)
            return QuestionDetailResponse(
                **base.model_dump(),
                score=summary.tally.score,
                upvotes=summary.tally.upvotes,
                downvotes=summary.tally.downvotes,
                user_vote=summary.user_vote,
                answer_count=len(details),
                answers=details,
            )
