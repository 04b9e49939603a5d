"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentLifecycleService, VoteAggregator
from discuss.domain.value import CommentId, UserId

from .response import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(
        self,
        lifecycle_service: CommentLifecycleService,
        vote_aggregator: VoteAggregator,
    ) -> None:
        """Initialize update comment use case.

        Args:
            lifecycle_service: Comment lifecycle service
            vote_aggregator: Vote tally service
        """
        self.lifecycle_service = lifecycle_service
        self.vote_aggregator = vote_aggregator

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Updated comment with current vote tallies

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user doesn't own the comment
            ContentDeletedError: If the comment is soft-deleted
        """
        user_id = UserId(UUID(request.user_id))
        updated = await self.lifecycle_service.update(
            actor_id=user_id,
            comment_id=CommentId(UUID(request.comment_id)),
            content=request.content,
        )

        [view] = await self.vote_aggregator.annotate([updated], viewer_id=user_id)
        return CommentResponse.from_view(view)
