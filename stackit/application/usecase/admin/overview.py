"""Admin dashboard use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from stackit.application.usecase.admin.base import authorize_admin
from stackit.application.usecase.base import BaseUseCase, CamelModel
from stackit.domain.service import (
    AnswerService,
    ModerationService,
    QuestionService,
    VoteService,
)

RECENT_LIMIT = 20


class AdminRequest(BaseModel):
    """Request carrying only the caller."""

    admin_id: Optional[str]


class OverviewResponse(CamelModel):
    """Site-wide counters."""

    total_users: int
    total_questions: int
    total_answers: int
    total_admins: int
    questions_today: int
    answers_today: int


class RecentQuestion(CamelModel):
    id: str
    author_id: str
    title: str
    tags: list[str]
    views: int
    answer_count: int
    created_at: datetime


class RecentAnswer(CamelModel):
    id: str
    question_id: str
    author_id: str
    content: str
    is_accepted: bool
    score: int
    created_at: datetime


class GetOverviewUseCase(BaseUseCase):
    """Use case for the admin overview counters."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: AdminRequest) -> OverviewResponse:
        """Count users, content and the last day's activity.

        Raises:
            NotAuthenticatedError: If no caller ID is given
            AdminRequiredError: If the caller is not an admin
        """
        await authorize_admin(self.moderation_service, request.admin_id)
        overview = await self.moderation_service.get_overview()
        return OverviewResponse(**overview.model_dump())


class GetRecentQuestionsUseCase(BaseUseCase):
    """Use case for the newest questions with their answer counts."""

    def __init__(
        self,
        moderation_service: ModerationService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        self.moderation_service = moderation_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: AdminRequest) -> list[RecentQuestion]:
        await authorize_admin(self.moderation_service, request.admin_id)

        questions, _ = await self.question_service.list_questions(limit=RECENT_LIMIT)
        answer_counts = await self.answer_service.count_answers_for(
            [q.id for q in questions]
        )
        return [
            RecentQuestion(
                id=str(q.id),
                author_id=str(q.author_id),
                title=q.title,
                tags=[tag.root for tag in q.tag_names],
                views=q.views,
                answer_count=answer_counts[q.id],
                created_at=q.created_at,
            )
            for q in questions
        ]


class GetRecentAnswersUseCase(BaseUseCase):
    """Use case for the newest answers with their scores."""

    def __init__(
        self,
        moderation_service: ModerationService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        self.moderation_service = moderation_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: AdminRequest) -> list[RecentAnswer]:
        await authorize_admin(self.moderation_service, request.admin_id)

        answers = await self.answer_service.get_recent_answers(RECENT_LIMIT)
        summaries = await self.vote_service.get_answer_summaries(
            [a.id for a in answers]
        )
        return [
            RecentAnswer(
                id=str(a.id),
                question_id=str(a.question_id),
                author_id=str(a.author_id),
                content=a.content,
                is_accepted=a.is_accepted,
                score=summaries[a.id].tally.score,
                created_at=a.created_at,
            )
            for a in answers
        ]
