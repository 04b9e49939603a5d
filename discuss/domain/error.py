"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class InvalidStateError(DomainError):
    """Raised when an operation is not allowed in the resource's current state."""

    pass


class ContentDeletedError(InvalidStateError):
    """Raised when attempting to edit or delete already deleted content."""

    def __init__(self, resource: str, resource_id: str, action: str = "edit"):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"Cannot {action} deleted {resource} {resource_id}")


class VoteNotFoundError(NotFoundError, InvalidStateError):
    """Raised when retracting a vote that was never cast.

    It is both a lookup miss and an invalid state transition, so callers
    catching either kind will see it.
    """

    def __init__(self, comment_id: str, voter_id: str):
        self.voter_id = voter_id
        super().__init__("Vote", f"comment={comment_id} voter={voter_id}")


class ThreadTooLargeError(InvalidStateError):
    """Raised when a thread holds more comments than one listing may load."""

    def __init__(self, parent_id: str, limit: int):
        self.parent_id = parent_id
        self.limit = limit
        super().__init__(f"Thread {parent_id} exceeds {limit} comments")


class ReplyTooDeepError(InvalidStateError):
    """Raised when a reply would nest below the deepest allowed level."""

    def __init__(self, parent_comment_id: str, limit: int):
        self.parent_comment_id = parent_comment_id
        self.limit = limit
        super().__init__(
            f"Cannot reply to comment {parent_comment_id}: replies nest at most "
            f"{limit} levels deep"
        )
