"""Domain value objects for discussion threads."""

from discuss.domain.value.identifiers import CommentId, ParentId, UserId
from discuss.domain.value.types import (
    DELETED_CONTENT,
    PageRequest,
    Pagination,
    ParentKind,
    VotePolarity,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "ParentId",
    # Types
    "DELETED_CONTENT",
    "PageRequest",
    "Pagination",
    "ParentKind",
    "VotePolarity",
]
