"""Comment entity.

Comments form threaded discussions under a parent entity (a post or a
review). Replies reference their parent comment through
``parent_comment_id``; the tree itself is rebuilt at read time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, ParentId, ParentKind, UserId


class Comment(DomainModel):
    """Comment entity.

    Content length is bounded by ``ThreadSettings.max_content_length``,
    checked before a comment is built.

    Lifecycle:
    - Active: content editable by its author
    - Soft-deleted: ``deleted_at`` set and content replaced by
      ``DELETED_CONTENT``; the row and its replies stay in the thread
    - Removed: the row no longer exists (hard delete of a leaf)
    """

    id: CommentId
    parent_kind: ParentKind
    parent_id: ParentId
    author_id: UserId
    content: str = Field(min_length=1)
    parent_comment_id: Optional[CommentId] = None
    # Nesting level: 0 for a root, parent depth + 1 for a reply
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Whether the comment has been soft-deleted."""
        return self.deleted_at is not None

    @property
    def is_root(self) -> bool:
        """Whether the comment is attached directly to the parent entity."""
        return self.parent_comment_id is None

    def can_be_edited_by(self, user_id: UserId) -> bool:
        """Only the original author may edit or delete a comment."""
        return self.author_id == user_id

    def belongs_to(self, parent_kind: ParentKind, parent_id: ParentId) -> bool:
        """Whether the comment is part of the given thread."""
        return self.parent_kind == parent_kind and self.parent_id == parent_id
