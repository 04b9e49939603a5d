"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.parent import PostgresParentEntityPort
from discuss.persistence.repository.vote import PostgresCommentVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresCommentVoteRepository",
    "PostgresParentEntityPort",
]
