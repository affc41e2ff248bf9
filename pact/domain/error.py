"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Structurally invalid input."""

    pass


class ConflictError(DomainError):
    """Operation conflicts with current state.

    Raised for double-booking a user into two active partnerships, for
    consuming an unusable invite code and for duplicate records.
    """

    def __init__(self, message: str, reason: str | None = None):
        self.reason = reason
        super().__init__(message)


class InvalidStateError(DomainError):
    """Raised when a status transition is not one of the allowed edges."""

    def __init__(self, resource: str, resource_id: str, current: str, target: str):
        self.resource = resource
        self.resource_id = resource_id
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move {resource} {resource_id} from {current} to {target}"
        )


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an operation they are not allowed to perform."""

    def __init__(self, action: str, user_id: str):
        self.action = action
        super().__init__(f"User {user_id} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthenticationError(DomainError):
    """Raised when credentials or a setup token do not check out."""

    pass
