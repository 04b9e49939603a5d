"""Comment vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from discuss.domain.model.vote import CommentVote
from discuss.domain.value import CommentId, UserId, VotePolarity


class CommentVoteRepository(ABC):
    """Repository for CommentVote entity.

    Votes are keyed by (voter_id, comment_id); there is never more than
    one row per pair.
    """

    @abstractmethod
    async def find(
        self, voter_id: UserId, comment_id: CommentId
    ) -> Optional[CommentVote]:
        """Find a voter's vote on a comment.

        Args:
            voter_id: The voter's user ID
            comment_id: The comment ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> List[CommentVote]:
        """Find all votes on a set of comments (batch query).

        Args:
            comment_ids: Comment IDs to fetch votes for

        Returns:
            Every vote row attached to any of the comments
        """
        pass

    @abstractmethod
    async def upsert(
        self, voter_id: UserId, comment_id: CommentId, polarity: VotePolarity
    ) -> CommentVote:
        """Create the vote or overwrite the polarity of an existing one.

        Args:
            voter_id: The voter's user ID
            comment_id: The comment ID
            polarity: Vote direction

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete(self, voter_id: UserId, comment_id: CommentId) -> bool:
        """Delete a voter's vote on a comment.

        Args:
            voter_id: The voter's user ID
            comment_id: The comment ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
