"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .parent import InMemoryParentEntityPort
from .vote import InMemoryCommentVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentVoteRepository",
    "InMemoryParentEntityPort",
]
