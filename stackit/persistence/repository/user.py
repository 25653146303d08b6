"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import User
from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId, UserRole
from stackit.persistence.mappers import row_to_user, user_to_dict
from stackit.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_recent(self, limit: int = 50) -> List[User]:
        """Find users, newest first."""
        stmt = (
            select(users_table).order_by(users_table.c.created_at.desc()).limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Save a user (create)."""
        stmt = insert(users_table).values(**user_to_dict(user))
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def set_role(self, user_id: UserId, role: UserRole) -> Optional[User]:
        """Change a user's role."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(role=role.value)
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user; their content and votes go with them (ON DELETE CASCADE)."""
        stmt = (
            delete(users_table)
            .where(users_table.c.id == user_id)
            .returning(users_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() is not None

    async def count(self, role: Optional[UserRole] = None) -> int:
        """Count users, optionally only those with the given role."""
        stmt = select(func.count()).select_from(users_table)
        if role is not None:
            stmt = stmt.where(users_table.c.role == role.value)
        result = await self.session.execute(stmt)
        return result.scalar_one()
