"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input for a domain operation.

    Carries the name of the offending field so callers can report it.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class UnauthorizedError(DomainError):
    """Raised when the acting identity may not perform an operation."""

    def __init__(self, action: str, identity_id: str | None = None):
        self.action = action
        self.identity_id = identity_id
        who = f"User {identity_id}" if identity_id else "Anonymous caller"
        super().__init__(f"{who} is not authorized to {action}")


class InvalidTransitionError(DomainError):
    """Raised when a moderation decision is applied to a non-pending post."""

    def __init__(self, post_id: str, current_status: str):
        self.post_id = post_id
        self.current_status = current_status
        super().__init__(
            f"Post {post_id} is already {current_status} and cannot be moderated"
        )


class InvalidStateError(DomainError):
    """Raised when a vote targets a post that is not approved."""

    def __init__(self, post_id: str, current_status: str):
        self.post_id = post_id
        self.current_status = current_status
        super().__init__(f"Cannot vote on {current_status} post {post_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class BackingStoreError(DomainError):
    """The storage boundary call failed.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Backing store failure during {operation}")
