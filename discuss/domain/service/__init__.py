"""Domain services."""

from .comment_service import CommentService
from .jwt_service import JWTService
from .lifecycle_service import CommentLifecycleService
from .pagination import PaginationPolicy
from .tree_builder import ThreadTreeBuilder
from .vote_aggregator import VoteAggregator

__all__ = [
    "CommentLifecycleService",
    "CommentService",
    "JWTService",
    "PaginationPolicy",
    "ThreadTreeBuilder",
    "VoteAggregator",
]
