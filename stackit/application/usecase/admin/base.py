"""Shared admin checks."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from stackit.application.usecase.base import CamelModel
from stackit.domain.error import NotAuthenticatedError
from stackit.domain.model import User
from stackit.domain.service import ModerationService
from stackit.domain.value import UserId, UserRole


class ModerationResponse(CamelModel):
    """Outcome of a moderation action."""

    message: str


class UserSummary(CamelModel):
    """A user as shown in the admin area."""

    id: str
    handle: str
    role: UserRole
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=str(user.id),
            handle=user.handle,
            role=user.role,
            created_at=user.created_at,
        )


async def authorize_admin(
    moderation_service: ModerationService, admin_id: Optional[str]
) -> User:
    """Resolve the caller and require the admin role.

    Raises:
        NotAuthenticatedError: If no caller ID is given
        AdminRequiredError: If the caller is not an admin
    """
    if not admin_id:
        raise NotAuthenticatedError("use admin tools")
    return await moderation_service.require_admin(UserId(UUID(admin_id)))
