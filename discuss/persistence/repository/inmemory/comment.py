"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import DELETED_CONTENT, CommentId, ParentId, ParentKind, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Comments with equal timestamps keep their insertion order.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _by_author(
        self,
        author_id: UserId,
        parent_kind: Optional[ParentKind],
        parent_id: Optional[ParentId],
    ) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.author_id == author_id
            and (parent_kind is None or c.parent_kind == parent_kind)
            and (parent_id is None or c.parent_id == parent_id)
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_parent(
        self,
        parent_kind: ParentKind,
        parent_id: ParentId,
        limit: Optional[int] = None,
    ) -> list[Comment]:
        """Find every comment of a thread, oldest first."""
        comments = [
            c for c in self._comments.values() if c.belongs_to(parent_kind, parent_id)
        ]
        comments.sort(key=lambda c: c.created_at)
        if limit is not None:
            comments = comments[:limit]
        return comments

    async def find_by_author(
        self,
        author_id: UserId,
        parent_kind: Optional[ParentKind] = None,
        parent_id: Optional[ParentId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments by a specific author, newest first."""
        comments = self._by_author(author_id, parent_kind, parent_id)
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_by_author(
        self,
        author_id: UserId,
        parent_kind: Optional[ParentKind] = None,
        parent_id: Optional[ParentId] = None,
    ) -> int:
        """Count comments by a specific author."""
        return len(self._by_author(author_id, parent_kind, parent_id))

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Mark a comment deleted and blank its content, keeping the row."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        now = datetime.now()
        updated = comment.model_copy(
            update={
                "content": DELETED_CONTENT,
                "deleted_at": comment.deleted_at or now,
                "updated_at": now,
            }
        )
        self._comments[comment_id] = updated
        return updated

    async def delete_if_leaf(self, comment_id: CommentId) -> bool:
        """Remove a comment row unless it has replies."""
        if comment_id not in self._comments:
            return False
        if any(c.parent_comment_id == comment_id for c in self._comments.values()):
            return False
        del self._comments[comment_id]
        return True
