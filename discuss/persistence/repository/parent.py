"""PostgreSQL implementation of the parent entity port."""

from typing import Optional

from sqlalchemy import Table, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.repository import ParentEntityPort
from discuss.domain.value import ParentId, ParentKind


class PostgresParentEntityPort(ParentEntityPort):
    """Parent entity port over any table with ``id`` and ``comment_count``.

    One instance is created per parent kind (posts, reviews).
    """

    def __init__(self, session: AsyncSession, table: Table, kind: ParentKind) -> None:
        """Initialize port.

        Args:
            session: SQLAlchemy async session
            table: Table holding the parent entities
            kind: Parent kind served by this port
        """
        self.session = session
        self.table = table
        self.kind = kind

    async def exists(self, parent_id: ParentId) -> bool:
        """Check whether a parent entity exists."""
        stmt = select(self.table.c.id).where(self.table.c.id == parent_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def increment_comment_count(self, parent_id: ParentId) -> None:
        """Atomically add one to the entity's comment counter."""
        stmt = (
            update(self.table)
            .where(self.table.c.id == parent_id)
            .values(comment_count=self.table.c.comment_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_comment_count(self, parent_id: ParentId) -> None:
        """Atomically subtract one from the entity's comment counter."""
        stmt = (
            update(self.table)
            .where(self.table.c.id == parent_id)
            .where(self.table.c.comment_count > 0)  # Don't go below 0
            .values(comment_count=self.table.c.comment_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def get_comment_count(self, parent_id: ParentId) -> Optional[int]:
        """Read the entity's stored comment counter."""
        stmt = select(self.table.c.comment_count).where(self.table.c.id == parent_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
