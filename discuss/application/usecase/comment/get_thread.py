"""Get discussion thread use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.domain.service import (
    CommentService,
    PaginationPolicy,
    ThreadTreeBuilder,
    VoteAggregator,
)
from discuss.domain.value import Pagination, ParentId, ParentKind, UserId

from .response import CommentNodeResponse


class GetThreadRequest(BaseModel):
    """Get thread request."""

    parent_kind: ParentKind
    parent_id: str  # UUID string
    page: int | None = None
    limit: int | None = None
    viewer_id: str | None = None  # Authenticated user, if any


class GetThreadResponse(BaseModel):
    """Get thread response.

    ``total`` counts root comments only; replies ride along with their root.
    """

    items: list[CommentNodeResponse]
    total: int
    pagination: Pagination


class GetThreadUseCase:
    """Use case for reading one page of a thread as nested reply trees."""

    def __init__(
        self,
        comment_service: CommentService,
        vote_aggregator: VoteAggregator,
        tree_builder: ThreadTreeBuilder,
        pagination_policy: PaginationPolicy,
    ) -> None:
        """Initialize get thread use case.

        Args:
            comment_service: Comment domain service
            vote_aggregator: Vote tally service
            tree_builder: Thread tree builder
            pagination_policy: Root-level pagination policy
        """
        self.comment_service = comment_service
        self.vote_aggregator = vote_aggregator
        self.tree_builder = tree_builder
        self.pagination_policy = pagination_policy

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Steps:
        1. Fetch the whole flat thread, oldest first
        2. Annotate every comment with vote tallies (one batched query)
        3. Build the reply forest
        4. Slice the roots for the requested page

        Args:
            request: Get thread request

        Returns:
            One page of root comments with complete reply trees

        Raises:
            ThreadTooLargeError: If the thread exceeds the configured maximum
        """
        parent_id = ParentId(UUID(request.parent_id))
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        page_request = self.pagination_policy.page_request(
            page=request.page, limit=request.limit
        )

        comments = await self.comment_service.list_thread(
            request.parent_kind, parent_id
        )
        views = await self.vote_aggregator.annotate(comments, viewer_id=viewer_id)
        roots = self.tree_builder.build(views)
        page = self.pagination_policy.paginate(roots, page_request)

        return GetThreadResponse(
            items=[CommentNodeResponse.from_domain(node) for node in page.items],
            total=page.total,
            pagination=page.pagination,
        )
