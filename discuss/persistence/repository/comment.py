"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, desc, exists, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import DELETED_CONTENT, CommentId, ParentId, ParentKind, UserId
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _author_filter(
        self,
        stmt,
        author_id: UserId,
        parent_kind: Optional[ParentKind],
        parent_id: Optional[ParentId],
    ):
        stmt = stmt.where(comments_table.c.author_id == author_id)
        if parent_kind is not None:
            stmt = stmt.where(comments_table.c.parent_kind == parent_kind.value)
        if parent_id is not None:
            stmt = stmt.where(comments_table.c.parent_id == parent_id)
        return stmt

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_parent(
        self,
        parent_kind: ParentKind,
        parent_id: ParentId,
        limit: Optional[int] = None,
    ) -> List[Comment]:
        """Find every comment of a thread, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_kind == parent_kind.value)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self,
        author_id: UserId,
        parent_kind: Optional[ParentKind] = None,
        parent_id: Optional[ParentId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments by a specific author, newest first."""
        stmt = self._author_filter(
            select(comments_table), author_id, parent_kind, parent_id
        )
        stmt = (
            stmt.order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_author(
        self,
        author_id: UserId,
        parent_kind: Optional[ParentKind] = None,
        parent_id: Optional[ParentId] = None,
    ) -> int:
        """Count comments by a specific author."""
        stmt = self._author_filter(
            select(func.count()).select_from(comments_table),
            author_id,
            parent_kind,
            parent_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(
                content=content,
                updated_at=datetime.now(),
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Mark a comment deleted and blank its content, keeping the row."""
        now = datetime.now()
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                content=DELETED_CONTENT,
                deleted_at=func.coalesce(comments_table.c.deleted_at, now),
                updated_at=now,
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete_if_leaf(self, comment_id: CommentId) -> bool:
        """Remove a comment row in one statement, only while it has no replies.

        A reply committed after the statement's snapshot still holds a
        RESTRICT foreign key on the row; the savepoint turns that violation
        into a refusal instead of aborting the request transaction.
        """
        replies = comments_table.alias("replies")
        stmt = (
            delete(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(~exists().where(replies.c.parent_comment_id == comment_id))
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except IntegrityError:
            return False
        return result.rowcount > 0  # type: ignore[attr-defined]
