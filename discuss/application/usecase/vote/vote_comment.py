"""Vote on comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentLifecycleService, CommentService, VoteAggregator
from discuss.domain.value import CommentId, UserId, VotePolarity


class VoteCommentRequest(BaseModel):
    """Vote on comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    polarity: VotePolarity


class VoteCommentResponse(BaseModel):
    """Vote on comment response with the comment's fresh tallies."""

    comment_id: str
    polarity: VotePolarity
    upvotes: int
    downvotes: int


class VoteCommentUseCase:
    """Use case for casting or switching a vote on a comment.

    Voting twice with the same polarity leaves a single vote in place.
    """

    def __init__(
        self,
        lifecycle_service: CommentLifecycleService,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
    ) -> None:
        """Initialize vote comment use case.

        Args:
            lifecycle_service: Comment lifecycle service
            comment_service: Comment domain service
            vote_aggregator: Vote tally service
        """
        self.lifecycle_service = lifecycle_service
        self.comment_service = comment_service
        self.vote_aggregator = vote_aggregator

    async def execute(self, request: VoteCommentRequest) -> VoteCommentResponse:
        """Execute vote flow.

        Args:
            request: Vote comment request

        Returns:
            Stored polarity and recounted tallies

        Raises:
            NotFoundError: If the comment does not exist
        """
        user_id = UserId(UUID(request.user_id))
        comment_id = CommentId(UUID(request.comment_id))

        vote = await self.lifecycle_service.vote(user_id, comment_id, request.polarity)

        comment = await self.comment_service.get_comment(comment_id)
        [view] = await self.vote_aggregator.annotate([comment], viewer_id=user_id)

        return VoteCommentResponse(
            comment_id=request.comment_id,
            polarity=vote.polarity,
            upvotes=view.upvotes,
            downvotes=view.downvotes,
        )
