"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentLifecycleService
from discuss.domain.value import CommentId, UserId


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool
    message: str


class RemoveVoteUseCase:
    """Use case for retracting a vote from a comment."""

    def __init__(self, lifecycle_service: CommentLifecycleService) -> None:
        """Initialize remove vote use case.

        Args:
            lifecycle_service: Comment lifecycle service
        """
        self.lifecycle_service = lifecycle_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Args:
            request: Remove vote request

        Returns:
            Remove vote response

        Raises:
            NotFoundError: If the comment does not exist
            VoteNotFoundError: If the user has not voted on the comment
        """
        await self.lifecycle_service.remove_vote(
            UserId(UUID(request.user_id)), CommentId(UUID(request.comment_id))
        )
        return RemoveVoteResponse(success=True, message="Vote removed successfully")
