"""Domain value objects for discussion threads.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import math
from enum import Enum

from pydantic import model_validator

from discuss.domain.value.common import ValueObject

# What readers see in place of a soft-deleted comment's content
DELETED_CONTENT = "[deleted]"

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class VotePolarity(str, Enum):
    """Direction of a comment vote."""

    UPVOTE = "UPVOTE"
    DOWNVOTE = "DOWNVOTE"


class ParentKind(str, Enum):
    """Kind of entity a discussion thread is attached to."""

    POST = "post"
    REVIEW = "review"


class PageRequest(ValueObject):
    """Requested page of root-level comments.

    Out-of-range values are clamped rather than rejected:
    page is at least 1, limit stays within [1, max_limit].
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE
    max_limit: int = MAX_PAGE_SIZE

    @model_validator(mode="before")
    @classmethod
    def clamp(cls, data: dict) -> dict:
        """Clamp page and limit into their allowed ranges."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        max_limit = max(1, int(data.get("max_limit") or MAX_PAGE_SIZE))
        page = data.get("page")
        limit = data.get("limit")
        data["max_limit"] = max_limit
        data["page"] = max(1, int(page)) if page is not None else DEFAULT_PAGE
        if limit is None:
            limit = min(DEFAULT_PAGE_SIZE, max_limit)
        data["limit"] = min(max(1, int(limit)), max_limit)
        return data

    @property
    def offset(self) -> int:
        """Number of root comments skipped before this page."""
        return (self.page - 1) * self.limit


class Pagination(ValueObject):
    """Pagination metadata returned alongside a page of results."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def for_page(cls, request: PageRequest, total: int) -> "Pagination":
        """Build metadata for a page request over ``total`` items."""
        return cls(
            page=request.page,
            limit=request.limit,
            total=total,
            pages=math.ceil(total / request.limit),
        )
