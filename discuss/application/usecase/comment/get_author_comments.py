"""Get author comment history use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import CommentService, PaginationPolicy, VoteAggregator
from discuss.domain.value import Pagination, ParentId, ParentKind, UserId

from .response import CommentResponse


class GetAuthorCommentsRequest(BaseModel):
    """Get author comments request."""

    author_id: str  # UUID string
    page: int | None = None
    limit: int | None = None
    viewer_id: str | None = None  # Authenticated user, if any
    parent_kind: ParentKind | None = None
    parent_id: str | None = None  # Restrict to one thread


class GetAuthorCommentsResponse(BaseModel):
    """Get author comments response."""

    items: list[CommentResponse]
    total: int
    pagination: Pagination


class GetAuthorCommentsUseCase:
    """Use case for listing a user's comments across threads, newest first.

    Unlike thread listings this is a flat list paginated in the query.
    """

    def __init__(
        self,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        pagination_policy: PaginationPolicy,
    ) -> None:
        """Initialize get author comments use case.

        Args:
            comment_service: Comment domain service
            vote_aggregator: Vote tally service
            pagination_policy: Pagination policy (page size bounds)
        """
        self.comment_service = comment_service
        self.vote_aggregator = vote_aggregator
        self.pagination_policy = pagination_policy

    async def execute(
        self, request: GetAuthorCommentsRequest
    ) -> GetAuthorCommentsResponse:
        """Execute get author comments flow.

        Args:
            request: Get author comments request

        Returns:
            One page of the author's comments with vote tallies
        """
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        parent_id = ParentId(UUID(request.parent_id)) if request.parent_id else None

        page_request = self.pagination_policy.page_request(
            page=request.page, limit=request.limit
        )
        comments, total = await self.comment_service.list_by_author(
            UserId(UUID(request.author_id)),
            page_request,
            parent_kind=request.parent_kind,
            parent_id=parent_id,
        )
        views = await self.vote_aggregator.annotate(comments, viewer_id=viewer_id)

        return GetAuthorCommentsResponse(
            items=[CommentResponse.from_view(view) for view in views],
            total=total,
            pagination=Pagination.for_page(page_request, total),
        )
