"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class AuthenticationError(DomainError):
    """Raised when credentials are missing, wrong, or the account is unusable."""

    pass


class ConflictError(DomainError):
    """Raised when creating something that must be unique and already exists."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
