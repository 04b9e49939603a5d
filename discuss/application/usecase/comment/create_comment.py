"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentLifecycleService
from discuss.domain.value import CommentId, ParentId, ParentKind, UserId

from .response import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    parent_kind: ParentKind
    parent_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str
    parent_comment_id: str | None = None  # Comment being replied to


class CreateCommentUseCase:
    """Use case for commenting on a parent entity or replying to a comment."""

    def __init__(self, lifecycle_service: CommentLifecycleService) -> None:
        """Initialize create comment use case.

        Args:
            lifecycle_service: Comment lifecycle service
        """
        self.lifecycle_service = lifecycle_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        The lifecycle service checks the parent entity and parent comment
        and bumps the parent entity's comment counter.

        Args:
            request: Create comment request

        Returns:
            Created comment (no votes yet)

        Raises:
            NotFoundError: If the parent entity or parent comment is missing
            InvalidStateError: If the parent comment is in another thread
            ValidationError: If the content is empty or too long
        """
        parent_comment_id = (
            CommentId(UUID(request.parent_comment_id))
            if request.parent_comment_id
            else None
        )
        comment = await self.lifecycle_service.create(
            actor_id=UserId(UUID(request.author_id)),
            parent_kind=request.parent_kind,
            parent_id=ParentId(UUID(request.parent_id)),
            content=request.content,
            parent_comment_id=parent_comment_id,
        )
        return CommentResponse.from_comment(comment)
