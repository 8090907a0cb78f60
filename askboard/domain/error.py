"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed direction, kind, id or content)."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials are missing, wrong or name no known user."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to act on something they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str = "edit"):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with existing state.

    Examples: a duplicate username, or two concurrent first votes by the
    same user on the same item.
    """

    pass
