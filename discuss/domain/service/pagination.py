"""Root-level pagination of discussion threads."""

from typing import Optional

import logfire

from discuss.config import ThreadSettings
from discuss.domain.model import ThreadNode, ThreadPage
from discuss.domain.value import PageRequest, Pagination


class PaginationPolicy:
    """Paginates root comments while keeping every reply subtree whole.

    Only roots are counted and sliced. A root on the page brings all of its
    descendants with it, however many there are.
    """

    def __init__(self, thread_settings: ThreadSettings) -> None:
        """Initialize pagination policy.

        Args:
            thread_settings: Thread configuration (page size bounds)
        """
        self.thread_settings = thread_settings

    def page_request(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> PageRequest:
        """Build a clamped page request using configured defaults.

        Args:
            page: Requested page (1-based), defaults to 1
            limit: Requested page size, defaults to the configured size

        Returns:
            Page request with page >= 1 and limit within bounds
        """
        return PageRequest(
            page=page,
            limit=limit if limit is not None else self.thread_settings.default_page_size,
            max_limit=self.thread_settings.max_page_size,
        )

    def paginate(self, roots: list[ThreadNode], request: PageRequest) -> ThreadPage:
        """Slice the built root list.

        Args:
            roots: All root nodes of the thread, already ordered
            request: Page to return

        Returns:
            The page of roots with ``total`` equal to the number of roots
        """
        total = len(roots)
        items = roots[request.offset : request.offset + request.limit]
        logfire.debug(
            "Thread page sliced",
            page=request.page,
            limit=request.limit,
            total=total,
            returned=len(items),
        )
        return ThreadPage(
            items=items,
            total=total,
            pagination=Pagination.for_page(request, total),
        )
