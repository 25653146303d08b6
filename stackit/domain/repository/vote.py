"""Vote repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Dict, List, Optional, Sequence

from stackit.domain.model.vote import Vote
from stackit.domain.value import AnswerId, UserId, VoteId, VoteTarget, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    def lock(
        self, user_id: UserId, target: VoteTarget
    ) -> AbstractAsyncContextManager[None]:
        """Serialize vote changes of one user on one target.

        The lock is held until the current transaction ends, so a
        read-existing / decide / write sequence run inside it cannot
        interleave with another one for the same (user, target).

        Args:
            user_id: The voter
            target: The question or answer being voted on

        Returns:
            Async context manager holding the lock
        """
        pass

    @abstractmethod
    async def find_by_user_and_target(
        self, user_id: UserId, target: VoteTarget
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            target: The question or answer

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_answers(
        self, user_id: UserId, answer_ids: Sequence[AnswerId]
    ) -> List[Vote]:
        """Find a user's votes on multiple answers (batch query).

        Args:
            user_id: The user's ID
            answer_ids: Answers to check

        Returns:
            List of votes by the user on the specified answers
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user and
                target (unique constraint violation)
        """
        pass

    @abstractmethod
    async def update_type(self, vote_id: VoteId, vote_type: VoteType) -> Optional[Vote]:
        """Flip the polarity of an existing vote in place.

        Returns:
            The updated vote, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Used when a user repeats their vote (toggle-off).
        """
        pass

    @abstractmethod
    async def count_by_type(self, target: VoteTarget) -> Dict[VoteType, int]:
        """Count votes on an item grouped by polarity.

        Types without votes may be missing from the result.
        """
        pass

    @abstractmethod
    async def count_by_type_for_answers(
        self, answer_ids: Sequence[AnswerId]
    ) -> Dict[AnswerId, Dict[VoteType, int]]:
        """Count votes grouped by polarity for many answers at once.

        Answers without votes may be missing from the result.
        """
        pass

    @abstractmethod
    async def delete_by_target(self, target: VoteTarget) -> int:
        """Delete every vote on an item.

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every vote cast by a user.

        Returns:
            Number of votes deleted
        """
        pass
