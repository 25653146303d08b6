"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.admin import (
    DeleteAnswerUseCase,
    DeleteQuestionUseCase,
    GetOverviewUseCase,
    GetRecentAnswersUseCase,
    GetRecentQuestionsUseCase,
    ListUsersUseCase,
    ModerateUseCase,
    UpdateUserRoleUseCase,
)
from stackit.application.usecase.answer import AcceptAnswerUseCase, CreateAnswerUseCase
from stackit.application.usecase.question import (
    CreateQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    TrackViewUseCase,
)
from stackit.application.usecase.vote import CastVoteUseCase, GetVoteSummaryUseCase
from stackit.config import PaginationSettings
from stackit.domain.repository import UnitOfWork
from stackit.domain.service import (
    AnswerService,
    ModerationService,
    QuestionService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, unit_of_work: UnitOfWork
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, unit_of_work=unit_of_work)

    @provide(scope=Scope.REQUEST)
    def get_vote_summary_use_case(
        self, vote_service: VoteService
    ) -> GetVoteSummaryUseCase:
        """Provide get vote summary use case."""
        return GetVoteSummaryUseCase(vote_service=vote_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        unit_of_work: UnitOfWork,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            question_service=question_service,
            answer_service=answer_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        unit_of_work: UnitOfWork,
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            question_service=question_service,
            answer_service=answer_service,
            unit_of_work=unit_of_work,
        )

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, unit_of_work: UnitOfWork
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, pagination: PaginationSettings
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, pagination=pagination
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_track_view_use_case(
        self, question_service: QuestionService, unit_of_work: UnitOfWork
    ) -> TrackViewUseCase:
        """Provide track view use case."""
        return TrackViewUseCase(
            question_service=question_service, unit_of_work=unit_of_work
        )

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, moderation_service: ModerationService, unit_of_work: UnitOfWork
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            moderation_service=moderation_service, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, moderation_service: ModerationService, unit_of_work: UnitOfWork
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            moderation_service=moderation_service, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_use_case(
        self, moderation_service: ModerationService, unit_of_work: UnitOfWork
    ) -> ModerateUseCase:
        """Provide moderation action use case."""
        return ModerateUseCase(
            moderation_service=moderation_service, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_overview_use_case(
        self, moderation_service: ModerationService
    ) -> GetOverviewUseCase:
        """Provide admin overview use case."""
        return GetOverviewUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_recent_questions_use_case(
        self,
        moderation_service: ModerationService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> GetRecentQuestionsUseCase:
        """Provide recent questions use case."""
        return GetRecentQuestionsUseCase(
            moderation_service=moderation_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_recent_answers_use_case(
        self,
        moderation_service: ModerationService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> GetRecentAnswersUseCase:
        """Provide recent answers use case."""
        return GetRecentAnswersUseCase(
            moderation_service=moderation_service,
            answer_service=answer_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, moderation_service: ModerationService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_role_use_case(
        self, moderation_service: ModerationService, unit_of_work: UnitOfWork
    ) -> UpdateUserRoleUseCase:
        """Provide update user role use case."""
        return UpdateUserRoleUseCase(
            moderation_service=moderation_service, unit_of_work=unit_of_work
        )
