"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId, ParentId, ParentKind, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_parent(
        self,
        parent_kind: ParentKind,
        parent_id: ParentId,
        limit: Optional[int] = None,
    ) -> List[Comment]:
        """Find every comment of a thread, oldest first.

        Soft-deleted comments are included so their replies keep a parent.

        Args:
            parent_kind: Kind of the parent entity
            parent_id: The parent entity's ID
            limit: Maximum number of rows to fetch (None for all)

        Returns:
            Flat list of comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        parent_kind: Optional[ParentKind] = None,
        parent_id: Optional[ParentId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first.

        Args:
            author_id: The author's user ID
            parent_kind: Restrict to one kind of parent entity
            parent_id: Restrict to one parent entity
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def count_by_author(
        self,
        author_id: UserId,
        parent_kind: Optional[ParentKind] = None,
        parent_id: Optional[ParentId] = None,
    ) -> int:
        """Count comments by a specific author.

        Args:
            author_id: The author's user ID
            parent_kind: Restrict to one kind of parent entity
            parent_id: Restrict to one parent entity

        Returns:
            Number of matching comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            Updated comment, or None if missing or soft-deleted
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Mark a comment deleted and blank its content, keeping the row.

        Args:
            comment_id: The comment ID

        Returns:
            The soft-deleted comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete_if_leaf(self, comment_id: CommentId) -> bool:
        """Remove a comment row unless it has replies (hard delete).

        The reply check and the removal happen atomically, so a reply stored
        concurrently is never removed along with its parent.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if the row was removed, False if it is missing or has replies
        """
        pass
