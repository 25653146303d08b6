"""Vote domain service."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.domain.error import ConflictError, NotFoundError
from stackit.domain.model.vote import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import (
    AnswerId,
    UserId,
    VoteAction,
    VoteId,
    VoteTally,
    VoteTarget,
    VoteType,
)
from stackit.domain.value.common import ValueObject

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


class VoteSummary(ValueObject):
    """Aggregate votes on one item plus the caller's own vote."""

    tally: VoteTally
    user_vote: Optional[VoteType] = None


class CastVoteResult(ValueObject):
    """Outcome of casting a vote."""

    action: VoteAction
    vote_type: VoteType  # The polarity that was requested
    user_vote: Optional[VoteType]  # Caller's vote after the change
    tally: VoteTally


class VoteService(Service):
    """Domain service for vote operations.

    Keeps at most one vote per user per question or answer and derives
    scores from the vote rows on every read.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service

    async def cast_vote(
        self, user_id: UserId, target: VoteTarget, vote_type: VoteType
    ) -> CastVoteResult:
        """Cast, flip, or withdraw a user's vote on a question or answer.

        - No existing vote: a vote with the given type is created
        - Existing vote of the same type: it is removed (toggle-off)
        - Existing vote of the other type: it is flipped in place

        The read-decide-write sequence runs under a per (user, target)
        lock held until the transaction ends.

        Args:
            user_id: Voter
            target: Question or answer to vote on
            vote_type: Requested polarity

        Returns:
            What happened and the recomputed tally

        Raises:
            NotFoundError: If the target does not exist
            ConflictError: If the store rejected a duplicate vote
        """
        with logfire.span(
            "vote_service.cast_vote",
            user_id=str(user_id),
            target=str(target),
            vote_type=vote_type.value,
        ):
            await self._ensure_target_exists(target)

            async with self.vote_repository.lock(user_id, target):
                existing = await self.vote_repository.find_by_user_and_target(
                    user_id, target
                )

                if existing is None:
                    await self._create_vote(user_id, target, vote_type)
                    action = VoteAction.CREATED
                    user_vote: Optional[VoteType] = vote_type
                elif existing.vote_type == vote_type:
                    await self.vote_repository.delete(existing.id)
                    action = VoteAction.REMOVED
                    user_vote = None
                else:
                    await self.vote_repository.update_type(existing.id, vote_type)
                    action = VoteAction.UPDATED
                    user_vote = vote_type

            tally = await self.get_tally(target)
            logfire.info(
                "Vote cast",
                user_id=str(user_id),
                target=str(target),
                action=action.value,
                score=tally.score,
            )
            return CastVoteResult(
                action=action,
                vote_type=vote_type,
                user_vote=user_vote,
                tally=tally,
            )

    async def get_tally(self, target: VoteTarget) -> VoteTally:
        """Count up and down votes on an item."""
        counts = await self.vote_repository.count_by_type(target)
        return VoteTally.from_counts(counts)

    async def get_vote_summary(
        self, target: VoteTarget, caller_id: Optional[UserId] = None
    ) -> VoteSummary:
        """Get the tally of an item and, if known, the caller's vote on it.

        Pure read; an item without votes (or that does not exist)
        summarizes to all zeros.
        """
        with logfire.span(
            "vote_service.get_vote_summary",
            target=str(target),
            caller_id=str(caller_id) if caller_id else None,
        ):
            tally = await self.get_tally(target)

            user_vote = None
            if caller_id is not None:
                vote = await self.vote_repository.find_by_user_and_target(
                    caller_id, target
                )
                user_vote = vote.vote_type if vote else None

            return VoteSummary(tally=tally, user_vote=user_vote)

    async def get_answer_summaries(
        self, answer_ids: Sequence[AnswerId], caller_id: Optional[UserId] = None
    ) -> dict[AnswerId, VoteSummary]:
        """Summarize votes for many answers at once.

        Args:
            answer_ids: Answers to summarize
            caller_id: Optional caller whose own votes are reported

        Returns:
            Dictionary mapping every given answer ID to its summary
        """
        if not answer_ids:
            return {}

        # Batch queries to avoid N+1
        counts = await self.vote_repository.count_by_type_for_answers(answer_ids)

        user_votes: dict[AnswerId, VoteType] = {}
        if caller_id is not None:
            votes = await self.vote_repository.find_by_user_and_answers(
                caller_id, answer_ids
            )
            user_votes = {
                vote.answer_id: vote.vote_type
                for vote in votes
                if vote.answer_id is not None
            }

        return {
            answer_id: VoteSummary(
                tally=VoteTally.from_counts(counts.get(answer_id, {})),
                user_vote=user_votes.get(answer_id),
            )
            for answer_id in answer_ids
        }

    async def _ensure_target_exists(self, target: VoteTarget) -> None:
        if target.question_id is not None:
            question = await self.question_service.get_question_by_id(
                target.question_id
            )
            if question is None:
                logfire.warn("Vote on non-existent question", target=str(target))
                raise NotFoundError("Question", str(target.question_id))
        else:
            answer = await self.answer_service.get_answer_by_id(
                target.answer_id  # type: ignore[arg-type]
            )
            if answer is None:
                logfire.warn("Vote on non-existent answer", target=str(target))
                raise NotFoundError("Answer", str(target.answer_id))

    async def _create_vote(
        self, user_id: UserId, target: VoteTarget, vote_type: VoteType
    ) -> Vote:
        vote = Vote(
            id=VoteId(uuid4()),
            user_id=user_id,
            question_id=target.question_id,
            answer_id=target.answer_id,
            vote_type=vote_type,
            created_at=datetime.now(),
        )

        try:
            return await self.vote_repository.save(vote)
        except IntegrityError:
            logfire.warn(
                "Duplicate vote attempt", user_id=str(user_id), target=str(target)
            )
            raise ConflictError(f"Vote already recorded for {target}")
