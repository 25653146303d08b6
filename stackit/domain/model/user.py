"""User entity.

Accounts are created by the login service. StackIt reads them for
moderation, and admins can change their role or remove them.
"""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import UserId, UserRole


class User(DomainModel):
    """User entity.

    Admins may delete any question or answer, remove users and change
    roles.
    """

    id: UserId
    handle: str = Field(min_length=1, max_length=255)
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN
