"""In-memory user repository for testing."""

from typing import Optional

from stackit.domain.model.user import User
from stackit.domain.repository.user import UserRepository
from stackit.domain.value import UserId, UserRole


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_recent(self, limit: int = 50) -> list[User]:
        """Find users, newest first."""
        users = sorted(self._users.values(), key=lambda u: u.created_at, reverse=True)
        return users[:limit]

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user

    async def set_role(self, user_id: UserId, role: UserRole) -> Optional[User]:
        """Change a user's role."""
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.evolve(role=role)
        self._users[user_id] = updated
        return updated

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None

    async def count(self, role: Optional[UserRole] = None) -> int:
        """Count users, optionally only those with the given role."""
        return sum(1 for u in self._users.values() if role is None or u.role is role)
