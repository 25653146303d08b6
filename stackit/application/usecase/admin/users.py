"""Admin user management use cases."""

from typing import Optional

from pydantic import BaseModel

from stackit.application.usecase.admin.base import UserSummary, authorize_admin
from stackit.application.usecase.admin.overview import AdminRequest
from stackit.application.usecase.base import BaseUseCase, CamelModel, parse_id
from stackit.domain.error import InvalidArgumentError
from stackit.domain.repository import UnitOfWork
from stackit.domain.service import ModerationService
from stackit.domain.value import UserId, UserRole

USERS_LIMIT = 50


class UpdateUserRoleRequest(BaseModel):
    admin_id: Optional[str]
    user_id: Optional[str]
    role: Optional[str]


class UpdateUserRoleResponse(CamelModel):
    message: str
    user: UserSummary


class ListUsersUseCase(BaseUseCase):
    """Use case for listing the newest users."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: AdminRequest) -> list[UserSummary]:
        await authorize_admin(self.moderation_service, request.admin_id)
        users = await self.moderation_service.list_users(USERS_LIMIT)
        return [UserSummary.from_user(user) for user in users]


class UpdateUserRoleUseCase(BaseUseCase):
    """Use case for promoting or demoting a user."""

    def __init__(
        self, moderation_service: ModerationService, unit_of_work: UnitOfWork
    ) -> None:
        self.moderation_service = moderation_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: UpdateUserRoleRequest) -> UpdateUserRoleResponse:
        """Execute update role flow.

        Raises:
            NotAuthenticatedError: If no caller ID is given
            AdminRequiredError: If the caller is not an admin
            InvalidArgumentError: If the user ID or role is missing or invalid
            NotFoundError: If the user does not exist
        """
        async with self.unit_of_work:
            await authorize_admin(self.moderation_service, request.admin_id)

            raw_user_id = parse_id(request.user_id, "userId")
            if raw_user_id is None or not request.role:
                raise InvalidArgumentError("User ID and role are required")
            role = UserRole.parse(request.role)

            user = await self.moderation_service.set_role(UserId(raw_user_id), role)

        return UpdateUserRoleResponse(
            message=f"User role updated to {role.value} successfully",
            user=UserSummary.from_user(user),
        )
