"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Malformed or contradictory input."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires a caller identity and none was given."""

    def __init__(self, action: str = "perform this action"):
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they have no rights over."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when the store rejects a write on a uniqueness constraint.

    Only reachable if the transactional guard was bypassed; retrying the
    whole operation is safe.
    """

    pass


class AdminRequiredError(NotAuthorizedError):
    """Raised when a user without the admin role attempts moderation."""

    def __init__(self, user_id: str):
        super().__init__("moderation", "admin", user_id)
