"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import HTTPException, status

from discuss.domain.error import (
    DomainError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ThreadTooLargeError,
    ValidationError,
)


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map a domain error raised while performing ``action`` to an HTTPException.

    Checked from most to least specific: a missing vote is reported as
    not found even though it is also an invalid state.

    Args:
        error: Error raised by a use case
        action: Short description for logs, e.g. "update comment"

    Returns:
        The HTTPException to raise
    """
    if isinstance(error, NotFoundError):
        logfire.warn(f"Failed to {action} - not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"Unauthorized attempt to {action}", error=str(error))
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {action}",
        )
    if isinstance(error, ThreadTooLargeError):
        logfire.warn(f"Failed to {action} - thread too large", error=str(error))
        return HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(error)
        )
    if isinstance(error, InvalidStateError):
        logfire.warn(f"Failed to {action} - invalid state", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, (ValidationError, ValueError)):
        # ValueError covers malformed UUIDs in path and body
        logfire.warn(f"Failed to {action} - validation error", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, DomainError):
        logfire.warn(f"Failed to {action}", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    raise TypeError(f"Not a domain error: {error!r}") from error
