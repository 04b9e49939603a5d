"""In-memory comment vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from discuss.domain.model.vote import CommentVote
from discuss.domain.repository.vote import CommentVoteRepository
from discuss.domain.value import CommentId, UserId, VotePolarity


class InMemoryCommentVoteRepository(CommentVoteRepository):
    """In-memory implementation of CommentVoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, CommentId], CommentVote] = {}

    async def find(
        self, voter_id: UserId, comment_id: CommentId
    ) -> Optional[CommentVote]:
        """Find a voter's vote on a comment."""
        return self._votes.get((voter_id, comment_id))

    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> list[CommentVote]:
        """Find all votes on a set of comments (batch query)."""
        wanted = set(comment_ids)
        return [v for v in self._votes.values() if v.comment_id in wanted]

    async def upsert(
        self, voter_id: UserId, comment_id: CommentId, polarity: VotePolarity
    ) -> CommentVote:
        """Create the vote or overwrite the polarity of an existing one."""
        now = datetime.now()
        existing = self._votes.get((voter_id, comment_id))
        if existing is None:
            vote = CommentVote(
                voter_id=voter_id,
                comment_id=comment_id,
                polarity=polarity,
                created_at=now,
                updated_at=now,
            )
        else:
            vote = existing.model_copy(update={"polarity": polarity, "updated_at": now})
        self._votes[(voter_id, comment_id)] = vote
        return vote

    async def delete(self, voter_id: UserId, comment_id: CommentId) -> bool:
        """Delete a voter's vote on a comment."""
        return self._votes.pop((voter_id, comment_id), None) is not None

    def count(self) -> int:
        """Number of stored vote rows."""
        return len(self._votes)
