"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentLifecycleService
from discuss.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    removed: bool  # False when the comment was kept as "[deleted]"
    message: str


class DeleteCommentUseCase:
    """Use case for deleting a comment.

    Comments with replies are soft-deleted so the conversation under them
    survives; leaf comments are removed outright.
    """

    def __init__(self, lifecycle_service: CommentLifecycleService) -> None:
        """Initialize delete comment use case.

        Args:
            lifecycle_service: Comment lifecycle service
        """
        self.lifecycle_service = lifecycle_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Whether the comment was removed or soft-deleted

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user doesn't own the comment
            ContentDeletedError: If the comment is already soft-deleted
        """
        removed = await self.lifecycle_service.delete(
            actor_id=UserId(UUID(request.user_id)),
            comment_id=CommentId(UUID(request.comment_id)),
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id,
            removed=removed,
            message="Comment removed" if removed else "Comment content deleted",
        )
