"""PostgreSQL implementation of CommentVote repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import CommentVote
from discuss.domain.repository import CommentVoteRepository
from discuss.domain.value import CommentId, UserId, VotePolarity
from discuss.persistence.mappers import row_to_comment_vote
from discuss.persistence.tables import comment_votes_table


class PostgresCommentVoteRepository(CommentVoteRepository):
    """PostgreSQL implementation of CommentVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self, voter_id: UserId, comment_id: CommentId
    ) -> Optional[CommentVote]:
        """Find a voter's vote on a comment."""
        stmt = select(comment_votes_table).where(
            and_(
                comment_votes_table.c.voter_id == voter_id,
                comment_votes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_vote(row._asdict()) if row else None

    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> List[CommentVote]:
        """Find all votes on a set of comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_votes_table).where(
            comment_votes_table.c.comment_id.in_(comment_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(
        self, voter_id: UserId, comment_id: CommentId, polarity: VotePolarity
    ) -> CommentVote:
        """Create the vote or overwrite the polarity of an existing one."""
        now = datetime.now()
        stmt = insert(comment_votes_table).values(
            voter_id=voter_id,
            comment_id=comment_id,
            polarity=polarity.value,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_comment_vote",
            set_={"polarity": stmt.excluded.polarity, "updated_at": now},
        ).returning(comment_votes_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment_vote(row._asdict())

    async def delete(self, voter_id: UserId, comment_id: CommentId) -> bool:
        """Delete a voter's vote on a comment."""
        stmt = delete(comment_votes_table).where(
            and_(
                comment_votes_table.c.voter_id == voter_id,
                comment_votes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
