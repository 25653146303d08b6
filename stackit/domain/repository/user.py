"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.user import User
from stackit.domain.value import UserId, UserRole


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 50) -> List[User]:
        """Find users, newest first."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create)."""
        pass

    @abstractmethod
    async def set_role(self, user_id: UserId, role: UserRole) -> Optional[User]:
        """Change a user's role.

        Returns:
            The updated user, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user.

        Returns:
            True if a user was deleted
        """
        pass

    @abstractmethod
    async def count(self, role: Optional[UserRole] = None) -> int:
        """Count users, optionally only those with the given role."""
        pass
